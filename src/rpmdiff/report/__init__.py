"""Report module for package comparison results.

This package contains:
- match_result: MatchResult, MatchStatus and CompareSummary describing comparison rows
- render: Ordering of results and rendering to the console or CSV
"""
