"""Command-line argument parsing for filelistgen.

This module defines the command-line interface for filelistgen,
handling argument parsing and validation.
"""

import argparse

from filelistgen import __version__
from filelistgen.defaults import (
    DEFAULT_BASE_DIR,
    DEFAULT_OUTPUT_FILE,
    DEFAULT_RENDER_FORMAT,
    DEFAULT_SUITE_CLASS,
    DEFAULT_SUITE_PACKAGE,
    STDOUT_MARKER,
)
from filelistgen.types import RenderFormat


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with filelistgen's options.
    """
    description = """
    filelistgen: Create a list of the files below a base directory.

    The base directory is scanned recursively and every file selected by the include
    and exclude patterns is written to the output file, in one of three formats:

    - json:  a pretty-printed JSON array of relative paths
    - text:  one relative path per line
    - junit: the Java source of a JUnit suite running one class per file

    Patterns use Ant-style globs relative to the base directory: '*' matches within
    a single path segment, '**' matches any number of segments, and '?' matches a
    single character. Without any --include pattern every file is included.
    Excludes always take precedence over includes.
    """

    epilog = """
    Examples:
      # List every file under ./target/ into ./target/file-list.json
      filelistgen

      # List Java sources as plain text
      filelistgen -b src -i "**/*.java" -t text -o build/sources.txt

      # Combine several include and exclude patterns
      filelistgen -b web -i "**/*.js" -i "**/*.css" -x "**/vendor/**" -x "**/*.min.js"

      # Prefix every path with '/' and match case-sensitively
      filelistgen -b public -s -c -i "**/*.HTML"

      # Generate a JUnit suite from the compiled test classes
      filelistgen -b src/test/java -i "**/*Test.java" -t junit -o build/AllTestsSuite.java

      # Write to standard output with progress information on stderr
      filelistgen -b src -o - -v
    """

    parser = argparse.ArgumentParser(
        prog="filelistgen",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    # Version information
    parser.add_argument(
        "-V", "--version", action="version", version=f"filelistgen {__version__}", help="Show the version and exit"
    )

    parser.add_argument(
        "-b",
        "--base-dir",
        default=DEFAULT_BASE_DIR,
        metavar="DIR",
        help=f"Base directory of the scan. Paths in the output are relative to it (default: {DEFAULT_BASE_DIR}).",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=DEFAULT_OUTPUT_FILE,
        metavar="FILE",
        help=(
            f"Output file. Missing parent directories are created. Use '{STDOUT_MARKER}' for standard output "
            f"(default: {DEFAULT_OUTPUT_FILE})."
        ),
    )
    parser.add_argument(
        "-i",
        "--include",
        dest="includes",
        action="append",
        default=[],
        metavar="PATTERN",
        help="Ant-style include pattern, e.g. '**/*.java' (can be specified multiple times).",
    )
    parser.add_argument(
        "-x",
        "--exclude",
        dest="excludes",
        action="append",
        default=[],
        metavar="PATTERN",
        help="Ant-style exclude pattern, e.g. '**/internal/**' (can be specified multiple times).",
    )
    parser.add_argument(
        "-t",
        "--type",
        choices=[f.value for f in RenderFormat],
        default=DEFAULT_RENDER_FORMAT.value,
        help=f"Output format (default: {DEFAULT_RENDER_FORMAT.value}).",
    )
    parser.add_argument(
        "-c",
        "--case-sensitive",
        action="store_true",
        help="Match patterns case-sensitively. By default matching ignores case.",
    )
    parser.add_argument(
        "-s",
        "--slash-prefix",
        action="store_true",
        help="Prefix every path in the output with '/'.",
    )
    parser.add_argument(
        "-P",
        "--permission-action",
        choices=["ignore", "warn", "fail"],
        default="ignore",
        help="How to handle directories that can't be read (default: ignore).",
    )
    parser.add_argument(
        "--suite-package",
        default=DEFAULT_SUITE_PACKAGE,
        metavar="PACKAGE",
        help=f"Java package of the generated suite, for --type junit (default: {DEFAULT_SUITE_PACKAGE}).",
    )
    parser.add_argument(
        "--suite-class",
        default=DEFAULT_SUITE_CLASS,
        metavar="NAME",
        help=f"Class name of the generated suite, for --type junit (default: {DEFAULT_SUITE_CLASS}).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log progress to stderr; repeat for debug output.",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Only log errors.",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs additional validation beyond what argparse can handle.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if args.verbose and args.quiet:
        raise ValueError("-v/--verbose and -q/--quiet are mutually exclusive")
    if not args.suite_class.isidentifier():
        raise ValueError(f"--suite-class must be a valid class name, got '{args.suite_class}'")
    if not all(part.isidentifier() for part in args.suite_package.split(".")):
        raise ValueError(f"--suite-package must be a valid package name, got '{args.suite_package}'")
