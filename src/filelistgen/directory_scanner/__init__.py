"""Directory traversal with configurable pattern rules.

This module provides the scanner that walks a directory tree and yields the
relative paths of the files selected by include and exclude patterns.
"""
