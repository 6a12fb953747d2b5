"""Parsing of package identifier lines in ``name-version-release.arch`` form."""

from dataclasses import dataclass

# Longest raw line considered; anything beyond is cut off before parsing
MAX_LINE_LENGTH = 511


@dataclass(frozen=True)
class PackageIdentifier:
    """A package identifier parsed from one line of a package list.

    Attributes:
        name: Package name. May contain hyphens (e.g. 'my-tool').
        version: Version and release joined by a hyphen (e.g. '1.2-3'). Treated as
                 an opaque string; no version ordering is implied.
        arch: Architecture suffix after the last dot (e.g. 'x86_64', 'noarch').
        raw_line: The source line with its trailing newline stripped, reproduced
                  verbatim in reports.
    """
    name: str
    version: str
    arch: str
    raw_line: str

    def same_package(self, other: 'PackageIdentifier') -> bool:
        """Check whether name, version and arch all match."""
        return (self.name == other.name and
                self.version == other.version and
                self.arch == other.arch)


def _find_second_last_hyphen(text: str, last_hyphen: int) -> int:
    """Locate the hyphen preceding ``last_hyphen`` by scanning from the start.

    Returns:
        Index of the hyphen, or -1 if ``last_hyphen`` is the only one
    """
    found = -1
    position = text.find('-')
    while 0 <= position < last_hyphen:
        found = position
        position = text.find('-', position + 1)
    return found


def parse_package(line: str) -> PackageIdentifier | None:
    """Split a package list line into name, version and architecture.

    The line is expected in ``name-version-release.arch`` form. The architecture is
    everything after the last dot, the version is everything after the second-to-last
    hyphen of what remains, and the name is everything before that hyphen.

    Args:
        line: A line read from a package list, with or without its trailing newline

    Returns:
        The parsed identifier, or None if the line does not follow the naming convention
        (no dot, fewer than two hyphens before the dot, or an empty name)

    Examples:
        >>> parse_package('foo-bar-1.0-1.x86_64\\n')
        PackageIdentifier(name='foo-bar', version='1.0-1', arch='x86_64', raw_line='foo-bar-1.0-1.x86_64')
        >>> parse_package('badline') is None
        True
    """
    raw_line = line[:MAX_LINE_LENGTH]
    if raw_line.endswith('\n'):
        raw_line = raw_line[:-1]

    last_dot = raw_line.rfind('.')
    if last_dot < 0:
        return None
    arch = raw_line[last_dot + 1:]
    remainder = raw_line[:last_dot]

    last_hyphen = remainder.rfind('-')
    if last_hyphen < 0:
        return None

    second_last_hyphen = _find_second_last_hyphen(remainder, last_hyphen)
    if second_last_hyphen < 0:
        return None

    name = remainder[:second_last_hyphen]
    if not name:
        return None

    return PackageIdentifier(
        name=name,
        version=remainder[second_last_hyphen + 1:],
        arch=arch,
        raw_line=raw_line,
    )
