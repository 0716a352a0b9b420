"""Command-line interface for filelistgen.

This module provides the command-line entry point, which scans a base directory and
writes the list of matching files. It handles argument parsing, logging setup,
error reporting, and signal management for graceful interruption handling.

Exit Codes:
    0: Successful completion
    1: Configuration or output error
    2: Command-line syntax error
    126: Permission denied (with -P fail)
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (SIGPIPE) on Unix-like systems

Example:
    # Write all files below ./target/ to ./target/file-list.json
    $ filelistgen

    # Text list of Java sources
    $ filelistgen -b src -i "**/*.java" -t text -o sources.txt
"""

import logging
import sys
from typing import Union

from filelistgen.cli.argparser import create_parser, validate_args
from filelistgen.defaults import STDOUT_MARKER
from filelistgen.directory_scanner.permission_action import PermissionAction
from filelistgen.file_list_generator import FileListGenerator
from filelistgen.io.signal_handler import signal_handler
from filelistgen.scan_request import ScanRequest
from filelistgen.types import PathType


def configure_logging(verbosity: int, quiet: bool = False) -> None:
    """Configure root logging for command-line use.

    Args:
        verbosity: Number of -v flags given. 0 logs warnings, 1 adds progress
            information, 2 or more adds debug output.
        quiet: Only log errors.
    """
    if quiet:
        level = logging.ERROR
    elif verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    logging.basicConfig(level=level, format="%(levelname)s: %(message)s", stream=sys.stderr, force=True)


def main() -> None:
    """Main entry point for the filelistgen command-line interface.

    Exit codes:
        0: Successful completion
        1: Configuration or output error
        2: Command-line syntax error
        126: Permission denied (with -P fail)
        130: Interrupted by SIGINT (Ctrl+C)
        141: Broken pipe (SIGPIPE) on Unix-like systems
    """
    signal_handler.install()

    try:
        parser = create_parser()
        # argparse calls sys.exit(2) for argument errors or sys.exit(0) for --version
        args = parser.parse_args()

        # Perform additional validation beyond what argparse supports directly
        validate_args(args)
        configure_logging(args.verbose, args.quiet)

        # Map CLI permission actions to internal enum
        perm_action = {
            "ignore": PermissionAction.IGNORE,
            "warn": PermissionAction.WARN,
            "fail": PermissionAction.RAISE,
        }[args.permission_action]

        request = ScanRequest(
            base_dir=args.base_dir,
            includes=args.includes,
            excludes=args.excludes,
            case_sensitive=args.case_sensitive,
            prefix_with_slash=args.slash_prefix,
        )
        generator = FileListGenerator(request, permission_action=perm_action)

        output: Union[int, PathType] = sys.stdout.fileno() if args.output == STDOUT_MARKER else args.output

        try:
            generator.generate(
                output,
                args.type,
                suite_package=args.suite_package,
                suite_class=args.suite_class,
            )
        except BrokenPipeError:
            pass  # SafeWriter closes the output in its context manager
        except PermissionError as e:
            print(f"Error: {str(e)}", file=sys.stderr)
            sys.exit(126)

    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)

    # Handle exit codes based on received signals
    exit_code = signal_handler.exit_code()
    if exit_code is not None:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
