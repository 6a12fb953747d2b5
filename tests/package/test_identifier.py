"""Tests for package identifier parsing."""
import unittest

from rpmdiff.package.identifier import MAX_LINE_LENGTH, PackageIdentifier, parse_package


class ParsePackageTest(unittest.TestCase):
    """Tests for parse_package()."""

    def test_simple_package(self):
        package = parse_package('foo-1.0-1.x86_64')
        self.assertEqual(PackageIdentifier('foo', '1.0-1', 'x86_64', 'foo-1.0-1.x86_64'), package)

    def test_trailing_newline_is_stripped(self):
        package = parse_package('foo-1.0-1.x86_64\n')
        self.assertEqual('foo-1.0-1.x86_64', package.raw_line)
        self.assertEqual('x86_64', package.arch)

    def test_hyphenated_name(self):
        """Only the last two hyphens delimit version and release."""
        package = parse_package('foo-bar-1.0-1.x86_64')
        self.assertEqual('foo-bar', package.name)
        self.assertEqual('1.0-1', package.version)
        self.assertEqual('x86_64', package.arch)

    def test_noarch_package_with_hyphenated_name(self):
        package = parse_package('my-tool-1.2-3.noarch')
        self.assertEqual(('my-tool', '1.2-3', 'noarch'), (package.name, package.version, package.arch))

    def test_release_with_dist_tag(self):
        """Dots inside the release stay in the version; arch is after the last dot."""
        package = parse_package('python3-libs-3.9.18-1.el9_3.x86_64')
        self.assertEqual('python3-libs', package.name)
        self.assertEqual('3.9.18-1.el9_3', package.version)
        self.assertEqual('x86_64', package.arch)

    def test_round_trip_of_constructed_identifiers(self):
        cases = [
            ('a', '1', '1', 'noarch'),
            ('kernel-core', '5.14.0', '362.8.1.el9_3', 'x86_64'),
            ('perl-File-Path', '2.18', '4.el9', 'noarch'),
            ('x-y-z-w', '0.0.1', '0', 'aarch64'),
        ]
        for name, version, release, arch in cases:
            with self.subTest(name=name):
                package = parse_package(f'{name}-{version}-{release}.{arch}')
                self.assertEqual(name, package.name)
                self.assertEqual(f'{version}-{release}', package.version)
                self.assertEqual(arch, package.arch)

    def test_line_without_dot_fails(self):
        self.assertIsNone(parse_package('badline'))
        self.assertIsNone(parse_package('foo-1-1'))

    def test_line_with_one_hyphen_fails(self):
        self.assertIsNone(parse_package('foo-1.x86_64'))

    def test_line_without_hyphen_fails(self):
        self.assertIsNone(parse_package('foo.x86_64'))

    def test_hyphens_only_after_last_dot_fail(self):
        """Hyphens in the arch part do not count."""
        self.assertIsNone(parse_package('foo.bar-1-2'))

    def test_empty_name_fails(self):
        self.assertIsNone(parse_package('-1.0-1.x86_64'))

    def test_empty_arch_is_accepted(self):
        package = parse_package('foo-1.0-1.')
        self.assertEqual('', package.arch)
        self.assertEqual('1.0-1', package.version)

    def test_long_line_is_truncated(self):
        name = 'n' * (MAX_LINE_LENGTH + 100)
        package = parse_package(f'pkg-1-1.{name}')
        self.assertEqual(MAX_LINE_LENGTH, len(package.raw_line))
        self.assertEqual(MAX_LINE_LENGTH - len('pkg-1-1.'), len(package.arch))

    def test_identifier_is_immutable(self):
        package = parse_package('foo-1.0-1.x86_64')
        with self.assertRaises(AttributeError):
            package.name = 'bar'

    def test_same_package(self):
        a = parse_package('foo-1.0-1.x86_64')
        self.assertTrue(a.same_package(parse_package('foo-1.0-1.x86_64\n')))
        self.assertFalse(a.same_package(parse_package('foo-1.0-1.i686')))
        self.assertFalse(a.same_package(parse_package('foo-1.0-2.x86_64')))


if __name__ == '__main__':
    unittest.main()
