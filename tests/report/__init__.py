"""Tests for report module.

Test Files and Coverage:
========================

| Test File            | Test Classes     | Tested Constructs                        | Tested Functionalities               |
|----------------------|------------------|------------------------------------------|--------------------------------------|
| test_match_result.py | MatchResultTest  | MatchResult, MatchStatus, CompareSummary | Constructors, columns, partition tag |
| test_render.py       | SortResultsTest  | sort_results()                           | Partitioning, byte order, stability  |
|                      | RenderTest       | render_console(), render_csv()           | Row format, quoting, header, errors  |
"""
