from .errors import RpmDiffError, UsageError, FileOpenError
from .package.identifier import PackageIdentifier, parse_package
from .package.loader import load_package_list
from .report.match_result import CompareSummary, MatchResult, MatchStatus
from .report.render import sort_results, render_console, render_csv
from .commands.compare import CompareOptions, OutputFormat, PackageMatcher, do_compare, match_packages, summarize
