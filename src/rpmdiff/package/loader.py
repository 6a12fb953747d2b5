"""Loading package lists from plain text files."""

import logging
import os

from .identifier import PackageIdentifier, parse_package
from ..errors import FileOpenError

logger = logging.getLogger(__name__)


def load_package_list(path: str | os.PathLike) -> list[PackageIdentifier]:
    """Read a package list file into identifiers, keeping the file's line order.

    Lines of at most one character (including the newline) are skipped as blank.
    Lines that do not parse as ``name-version-release.arch`` are dropped without
    error; the number of loaded packages is the length of the returned list.
    Bytes that are not valid UTF-8 are kept as surrogate escapes, so lines differing
    only in such bytes stay distinct and are reproduced byte for byte on output.

    Args:
        path: Path to a text file with one package identifier per line

    Returns:
        Parsed identifiers in input order

    Raises:
        FileOpenError: The file cannot be opened for reading
    """
    try:
        f = open(path, 'r', encoding='utf-8', errors='surrogateescape')
    except OSError as e:
        raise FileOpenError(f"Cannot open file {os.fspath(path)}", path) from e

    packages: list[PackageIdentifier] = []
    dropped = 0
    with f:
        for line_number, line in enumerate(f, start=1):
            if len(line) <= 1:
                continue

            package = parse_package(line)
            if package is None:
                logger.debug(f"Skipping unparsable line {line_number} in {path}: {line.rstrip()!r}")
                dropped += 1
                continue

            packages.append(package)

    logger.info(f"Loaded {len(packages)} packages from {path} ({dropped} lines dropped)")
    return packages
