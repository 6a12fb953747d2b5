"""Package list parsing and loading.

This package contains:
- identifier: PackageIdentifier and parse_package for splitting name-version-release.arch lines
- loader: load_package_list for reading package list files
"""
