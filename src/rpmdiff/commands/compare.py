"""Compare subcommand for reconciling two package lists."""

import logging
import os
import sys
from dataclasses import dataclass
from enum import StrEnum
from typing import TextIO

from ..package.identifier import PackageIdentifier
from ..package.loader import load_package_list
from ..report.match_result import CompareSummary, MatchResult, MatchStatus
from ..report.render import DEFAULT_CSV_PATH, print_legend, render_console, render_csv, sort_results

logger = logging.getLogger(__name__)


class OutputFormat(StrEnum):
    CONSOLE = 'console'
    CSV = 'csv'


@dataclass
class CompareOptions:
    """Options for a comparison run.

    Attributes:
        file_a: Path to package list A
        file_b: Path to package list B
        output_format: Print rows to the console or write them to a CSV file
        output_path: CSV destination, used only with OutputFormat.CSV
    """
    file_a: str | os.PathLike
    file_b: str | os.PathLike
    output_format: OutputFormat = OutputFormat.CONSOLE
    output_path: str | os.PathLike = DEFAULT_CSV_PATH


class PackageMatcher:
    """Pairs entries of list A with entries of list B.

    Each A entry is matched against the first not-yet-consumed B entry with the same
    name, version and arch; failing that, against the first not-yet-consumed B entry
    with the same name. A B entry is consumed by at most one A entry. The search is a
    linear scan per A entry, O(|A|*|B|), which keeps the first-occurrence tie-break.
    """

    def __init__(self, packages_a: list[PackageIdentifier], packages_b: list[PackageIdentifier]):
        self._packages_a = packages_a
        self._packages_b = packages_b
        self._consumed = [False] * len(packages_b)

    def _find_exact(self, target: PackageIdentifier) -> int | None:
        for idx, candidate in enumerate(self._packages_b):
            if not self._consumed[idx] and candidate.same_package(target):
                return idx
        return None

    def _find_by_name(self, name: str) -> int | None:
        for idx, candidate in enumerate(self._packages_b):
            if not self._consumed[idx] and candidate.name == name:
                return idx
        return None

    def _match_one(self, package: PackageIdentifier) -> MatchResult:
        found_idx = self._find_exact(package)
        if found_idx is not None:
            self._consumed[found_idx] = True
            return MatchResult.identical(
                package.raw_line, self._packages_b[found_idx].raw_line, package.name)

        found_idx = self._find_by_name(package.name)
        if found_idx is None:
            return MatchResult.only_in_a(package.raw_line, package.name)

        self._consumed[found_idx] = True
        return MatchResult.differs(
            package.raw_line, self._packages_b[found_idx].raw_line, package.name)

    def run(self) -> list[MatchResult]:
        """Match all entries.

        Returns:
            One result per A entry in A's order, followed by one ONLY_IN_B result per
            unconsumed B entry in B's order
        """
        results = [self._match_one(package) for package in self._packages_a]

        for idx, package in enumerate(self._packages_b):
            if not self._consumed[idx]:
                results.append(MatchResult.only_in_b(package.raw_line, package.name))

        return results


def match_packages(packages_a: list[PackageIdentifier], packages_b: list[PackageIdentifier]) -> list[MatchResult]:
    """Match two package lists. See PackageMatcher for the matching rules."""
    return PackageMatcher(packages_a, packages_b).run()


def summarize(results: list[MatchResult], loaded_a: int = 0, loaded_b: int = 0) -> CompareSummary:
    """Count results by status."""
    summary = CompareSummary(loaded_a=loaded_a, loaded_b=loaded_b)
    for result in results:
        if result.status == MatchStatus.IDENTICAL:
            summary.identical += 1
        elif result.status == MatchStatus.DIFFERS:
            summary.differs += 1
        elif result.status == MatchStatus.ONLY_IN_A:
            summary.only_in_a += 1
        else:
            summary.only_in_b += 1
    return summary


def do_compare(options: CompareOptions, output: TextIO | None = None) -> CompareSummary:
    """Load both package lists, match them, and write the sorted report.

    Progress lines and the console report go to ``output``. In CSV mode the report file
    is only created after both lists have been loaded.

    Args:
        options: Comparison options
        output: Stream for progress and console output (default: standard output)

    Returns:
        Counts for the run

    Raises:
        FileOpenError: An input list cannot be read or the CSV file cannot be created
    """
    if output is None:
        output = sys.stdout

    packages_a = load_package_list(options.file_a)
    packages_b = load_package_list(options.file_b)

    print(f"Loaded {len(packages_a)} packages from {os.fspath(options.file_a)}", file=output)
    print(f"Loaded {len(packages_b)} packages from {os.fspath(options.file_b)}", file=output)

    results = sort_results(match_packages(packages_a, packages_b))
    summary = summarize(results, len(packages_a), len(packages_b))
    logger.info(
        f"Compared {summary.loaded_a} and {summary.loaded_b} packages: "
        f"{summary.identical} identical, {summary.differs} different, "
        f"{summary.only_in_a} only in A, {summary.only_in_b} only in B")

    if options.output_format == OutputFormat.CSV:
        render_csv(results, options.output_path)
        print(f"Results saved to {os.fspath(options.output_path)}", file=output)
    else:
        print_legend(output)
        render_console(results, output)

    return summary
