"""Tests for package module.

Test Files and Coverage:
========================

| Test File          | Test Classes        | Tested Constructs                   | Tested Functionalities                  |
|--------------------|---------------------|-------------------------------------|-----------------------------------------|
| test_identifier.py | ParsePackageTest    | parse_package(), PackageIdentifier  | Splitting rules, hyphenated names, fail |
| test_loader.py     | LoadPackageListTest | load_package_list()                 | Order, blank lines, drops, open errors  |
"""
