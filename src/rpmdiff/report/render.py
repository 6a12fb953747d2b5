"""Ordering and rendering of comparison results to the console or a CSV file."""

import csv
import logging
import os
import sys
from typing import Iterable, TextIO

from .match_result import MatchResult
from ..errors import FileOpenError

logger = logging.getLogger(__name__)

DEFAULT_CSV_PATH = 'rpm_diff_result.csv'

CSV_HEADER = 'Package A,Status,Package B'

LEGEND = (
    "\n"
    "Comparison results:\n"
    "Format: A_package\\tstatus\\tB_package\n"
    "Status: < (A only), > (B only), | (different version/arch), = (identical)\n"
    "\n"
)


def sort_results(results: Iterable[MatchResult]) -> list[MatchResult]:
    """Order results for reporting.

    Rows owned by list A come first, followed by rows only in list B. Each group is
    sorted by package name in code point order, which matches byte order of the UTF-8
    encoding. The sort is stable, so rows with the same name keep their input order.

    Args:
        results: Results in matcher order

    Returns:
        A new list with A-side rows sorted, then B-only rows sorted
    """
    a_side: list[MatchResult] = []
    b_only: list[MatchResult] = []
    for result in results:
        (a_side if result.is_a_side else b_only).append(result)

    a_side.sort(key=lambda r: r.sort_key)
    b_only.sort(key=lambda r: r.sort_key)
    return a_side + b_only


def print_legend(stream: TextIO | None = None) -> None:
    """Write the console report legend."""
    if stream is None:
        stream = sys.stdout
    stream.write(LEGEND)


def render_console(results: Iterable[MatchResult], stream: TextIO | None = None) -> None:
    """Write results as tab-separated ``A_line, symbol, B_line`` rows.

    Args:
        results: Results in the order they should appear
        stream: Output stream (default: standard output)
    """
    if stream is None:
        stream = sys.stdout
    for result in results:
        stream.write('\t'.join(result.columns()) + '\n')


def render_csv(results: Iterable[MatchResult], path: str | os.PathLike = DEFAULT_CSV_PATH) -> None:
    """Write results to a CSV file, replacing any existing file.

    The header row is ``Package A,Status,Package B``; every data field is quoted.

    Args:
        results: Results in the order they should appear
        path: Destination file path

    Raises:
        FileOpenError: The destination file cannot be created
    """
    try:
        f = open(path, 'w', encoding='utf-8', errors='surrogateescape', newline='')
    except OSError as e:
        raise FileOpenError(f"Cannot create output file {os.fspath(path)}", path) from e

    with f:
        f.write(CSV_HEADER + '\n')
        writer = csv.writer(f, quoting=csv.QUOTE_ALL, lineterminator='\n')
        for result in results:
            writer.writerow(result.columns())

    logger.info(f"Wrote CSV report to {path}")
