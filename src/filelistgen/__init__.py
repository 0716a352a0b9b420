"""File list generation utilities.

This package scans a directory tree for files matching Ant-style include and
exclude patterns and writes the matched list as JSON, plain text, or a JUnit
test-suite source file.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("filelistgen")
except PackageNotFoundError:
    __version__ = "unknown"
