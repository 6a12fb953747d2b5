import argparse
import logging
import sys
import textwrap

from .commands.compare import CompareOptions, OutputFormat, do_compare
from .errors import FileOpenError, UsageError
from .report.render import DEFAULT_CSV_PATH
from .utils.profiling import profile_main

USAGE = '%(prog)s [--xlsx [OUTPUT]] [--log-file PATH] [--log-level LEVEL] FILE_A FILE_B'


class _ArgumentParser(argparse.ArgumentParser):
    """Argument parser that exits with status 1 on malformed arguments."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog='rpmdiff',
        allow_abbrev=False,
        usage=USAGE,
        description='Compare two lists of installed packages (name-version-release.arch, one per line) and '
                    'report which packages are identical, differ in version or architecture, or exist in only '
                    'one list.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=textwrap.dedent(f'''
            Examples:
              rpmdiff host-a.txt host-b.txt
              rpmdiff --xlsx host-a.txt host-b.txt
              rpmdiff --xlsx report.csv host-a.txt host-b.txt

            Status symbols:
              <  only in FILE_A
              >  only in FILE_B
              |  same name, different version/arch
              =  identical

            With --xlsx the report is written as CSV to OUTPUT (default: {DEFAULT_CSV_PATH}).
            ''').strip())
    parser.add_argument(
        '--xlsx',
        action='store_true',
        help='Write the report to a CSV file instead of printing it. When three paths are given, the first one '
             'is the output file.')
    parser.add_argument(
        '--log-file',
        metavar='PATH',
        help='Path to log file for operation logging. If not provided, no logging.')
    parser.add_argument(
        '--log-level',
        metavar='LEVEL',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        help='Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Defaults to INFO when --log-file is provided.')
    parser.add_argument(
        'paths',
        nargs='+',
        metavar='PATH',
        help='[OUTPUT] FILE_A FILE_B: package lists to compare, preceded by the CSV output path in --xlsx mode')
    return parser


def build_compare_options(args: argparse.Namespace) -> CompareOptions:
    """Turn parsed arguments into comparison options.

    Raises:
        UsageError: The number of paths does not fit the selected mode
    """
    paths = args.paths
    if args.xlsx:
        if len(paths) == 2:
            return CompareOptions(paths[0], paths[1], OutputFormat.CSV, DEFAULT_CSV_PATH)
        if len(paths) == 3:
            return CompareOptions(paths[1], paths[2], OutputFormat.CSV, paths[0])
        raise UsageError(f"--xlsx expects [OUTPUT] FILE_A FILE_B, got {len(paths)} paths")

    if len(paths) != 2:
        raise UsageError(f"expected FILE_A FILE_B, got {len(paths)} paths")
    return CompareOptions(paths[0], paths[1])


@profile_main
def rpmdiff_main(argv: list[str] | None = None):
    parser = build_parser()
    args = parser.parse_args(argv)

    # Configure logging from CLI argument if provided
    if args.log_file:
        log_level = args.log_level or 'INFO'
        logging.basicConfig(
            filename=args.log_file,
            level=getattr(logging, log_level),
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )

    try:
        options = build_compare_options(args)
    except UsageError as e:
        parser.error(str(e))

    # Undecodable input bytes travel as surrogate escapes and must be written back unchanged
    if hasattr(sys.stdout, 'reconfigure'):
        sys.stdout.reconfigure(errors='surrogateescape')

    try:
        do_compare(options)
    except FileOpenError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    rpmdiff_main()
