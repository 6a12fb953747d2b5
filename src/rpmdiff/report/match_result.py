"""MatchResult and related classes describing how a package compares across two lists."""

from dataclasses import dataclass
from enum import Enum


class MatchStatus(Enum):
    """Status of a package in the comparison, valued by its report symbol."""
    IDENTICAL = "="  # Same name, version and arch in both lists
    DIFFERS = "|"  # Same name, different version and/or arch
    ONLY_IN_A = "<"  # Only in list A
    ONLY_IN_B = ">"  # Only in list B

    @property
    def symbol(self) -> str:
        return self.value


@dataclass(frozen=True)
class MatchResult:
    """One row of the comparison report.

    Attributes:
        status: How the package compares across the two lists
        package_a: Raw line from list A, or None for ONLY_IN_B
        package_b: Raw line from list B, or None for ONLY_IN_A
        sort_key: Package name the row is ordered by. For A-side rows this is the
                  name from list A; for ONLY_IN_B rows, the name from list B.
    """
    status: MatchStatus
    package_a: str | None
    package_b: str | None
    sort_key: str

    @classmethod
    def identical(cls, package_a: str, package_b: str, sort_key: str) -> "MatchResult":
        return cls(MatchStatus.IDENTICAL, package_a, package_b, sort_key)

    @classmethod
    def differs(cls, package_a: str, package_b: str, sort_key: str) -> "MatchResult":
        return cls(MatchStatus.DIFFERS, package_a, package_b, sort_key)

    @classmethod
    def only_in_a(cls, package_a: str, sort_key: str) -> "MatchResult":
        return cls(MatchStatus.ONLY_IN_A, package_a, None, sort_key)

    @classmethod
    def only_in_b(cls, package_b: str, sort_key: str) -> "MatchResult":
        return cls(MatchStatus.ONLY_IN_B, None, package_b, sort_key)

    @property
    def is_a_side(self) -> bool:
        """Whether the row is owned by an entry of list A."""
        return self.status != MatchStatus.ONLY_IN_B

    def columns(self) -> tuple[str, str, str]:
        """Return the (A line, symbol, B line) columns with empty strings for missing sides."""
        return (self.package_a or '', self.status.symbol, self.package_b or '')


@dataclass
class CompareSummary:
    """Counts describing one comparison run.

    Attributes:
        loaded_a: Number of packages loaded from list A
        loaded_b: Number of packages loaded from list B
        identical: Number of IDENTICAL rows
        differs: Number of DIFFERS rows
        only_in_a: Number of ONLY_IN_A rows
        only_in_b: Number of ONLY_IN_B rows
    """
    loaded_a: int = 0
    loaded_b: int = 0
    identical: int = 0
    differs: int = 0
    only_in_a: int = 0
    only_in_b: int = 0

    @property
    def a_side(self) -> int:
        return self.identical + self.differs + self.only_in_a
