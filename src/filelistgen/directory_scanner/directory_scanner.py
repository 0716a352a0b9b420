"""Directory scanning with include and exclude pattern support.

This module provides the DirectoryScanner class, which walks a directory tree and
reports the files selected by a set of pattern rules, as paths relative to the
scanned directory.
"""

import errno
import logging
import os
import stat
from pathlib import Path
from typing import Iterator, List, Optional

from filelistgen.directory_scanner.permission_action import PermissionAction
from filelistgen.exceptions import ConfigurationError
from filelistgen.pattern_rules.base_rules import BasePatternRules
from filelistgen.types import PathType

logger = logging.getLogger(__name__)

# Errors meaning an entry resolves to nothing, as in pathlib's is_dir() and is_file()
_UNRESOLVABLE_ERRNOS = (errno.ENOENT, errno.ENOTDIR, errno.EBADF, errno.ELOOP)


class DirectoryScanner:
    """Scanner listing the files of a directory tree that match pattern rules.

    The tree is walked depth-first. Entries of each directory are visited in the
    order the operating system lists them, and a subdirectory is descended into as
    soon as it is encountered. The resulting order is therefore stable for an
    unchanged filesystem but is not sorted.

    Only files are reported; directories are traversed but never matched. Symbolic
    links are followed the way the filesystem resolves them: a link to a directory
    is descended into and a link to a file is reported as a file. Dangling links
    are skipped.

    Attributes:
        root_path (Path): The directory being scanned.
        rules (Optional[BasePatternRules]): Rules selecting files. None selects all files.
        permission_action (PermissionAction): How to handle directories that can't be listed
            and entries that can't be examined.

    Example:
        >>> from filelistgen.pattern_rules import SelectionRules
        >>> scanner = DirectoryScanner("target", SelectionRules.from_patterns(["**/*.java"]))  # doctest: +SKIP
        >>> scanner.scan()  # doctest: +SKIP
        ['a/Foo.java']
    """

    def __init__(
        self,
        root_path: PathType,
        rules: Optional[BasePatternRules] = None,
        permission_action: PermissionAction = PermissionAction.IGNORE,
    ) -> None:
        """Initialize a DirectoryScanner.

        Args:
            root_path: Directory to scan. Can be any path-like object.
            rules: Rules selecting which files are reported. Defaults to None (all files).
            permission_action: How to handle directories that can't be listed.
                Defaults to IGNORE.
        """
        self.root_path = Path(root_path)
        self.rules = rules
        self.permission_action = permission_action

    def check_root(self) -> None:
        """Verify that the root path is an existing directory.

        Raises:
            ConfigurationError: If the root path doesn't exist or isn't a directory.
        """
        if not self.root_path.exists():
            raise ConfigurationError(f"Base directory does not exist: {self.root_path}")
        if not self.root_path.is_dir():
            raise ConfigurationError(f"Base directory is not a directory: {self.root_path}")

    def iterate_files(self) -> Iterator[str]:
        """Iterate over the selected files in traversal order.

        Yields:
            Paths relative to the root directory, using "/" as the separator.

        Raises:
            ConfigurationError: If the root path doesn't exist or isn't a directory.
            PermissionError: If a directory can't be listed and permission_action is RAISE.
        """
        self.check_root()
        yield from self._walk(self.root_path, "")

    def scan(self) -> List[str]:
        """Scan the tree and return every selected file.

        Returns:
            Relative paths of the selected files in traversal order.

        Raises:
            ConfigurationError: If the root path doesn't exist or isn't a directory.
            PermissionError: If a directory can't be listed and permission_action is RAISE.
        """
        return list(self.iterate_files())

    def get_file_count(self) -> int:
        """Get the number of selected files.

        Returns:
            Number of files selected by the rules.
        """
        return sum(1 for _ in self.iterate_files())

    def _walk(self, directory: Path, relative_path: str) -> Iterator[str]:
        """Recursive helper for iterate_files."""
        try:
            children = os.listdir(directory)
        except OSError as e:
            # The root itself was validated, so this is a subdirectory we can't read
            self._handle_access_error(directory, "directory", e)
            return

        for child in children:
            child_path = directory / child
            child_relative_path = f"{relative_path}/{child}" if relative_path else child

            try:
                mode = child_path.stat().st_mode
            except OSError as e:
                # Dangling or looping symlinks are neither files nor directories
                if e.errno not in _UNRESOLVABLE_ERRNOS:
                    self._handle_access_error(child_path, "entry", e)
                continue

            if stat.S_ISDIR(mode):
                yield from self._walk(child_path, child_relative_path)
            elif stat.S_ISREG(mode):
                if self.rules is None or self.rules.matches(child_relative_path):
                    yield child_relative_path

    def _handle_access_error(self, path: Path, kind: str, error: OSError) -> None:
        """Skip or raise for a path that can't be accessed, per permission_action.

        Raises:
            PermissionError: If permission_action is RAISE.
        """
        if self.permission_action == PermissionAction.RAISE:
            raise PermissionError(f"Access denied to {path}: {error}")
        if self.permission_action == PermissionAction.WARN:
            logger.warning("Skipping unreadable %s %s: %s", kind, path, error)
        else:
            logger.debug("Skipping unreadable %s %s: %s", kind, path, error)
