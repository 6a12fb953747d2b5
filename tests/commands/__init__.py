"""Tests for command implementation modules.

Test Files and Coverage:
========================

| Test File       | Test Classes           | Tested Constructs                 | Tested Functionalities                      |
|-----------------|------------------------|-----------------------------------|---------------------------------------------|
| test_compare.py | PackageMatcherTest     | match_packages(), PackageMatcher  | Exact/name matching, tie-breaks, leftovers  |
|                 | MatchPropertiesTest    | match_packages(), summarize()     | Conservation, no double use, symmetry       |
|                 | CompareIntegrationTest | do_compare()                      | Console and CSV reports, progress, errors   |
"""
