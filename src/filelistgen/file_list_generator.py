"""File list generation.

This module provides the FileListGenerator class, which scans a directory for the
files selected by a ScanRequest and writes the resulting list in one of the
supported output formats.
"""

import logging
import os
from typing import List, Sequence, Union

from filelistgen.defaults import DEFAULT_SUITE_CLASS, DEFAULT_SUITE_PACKAGE
from filelistgen.directory_scanner.directory_scanner import DirectoryScanner
from filelistgen.directory_scanner.permission_action import PermissionAction
from filelistgen.exceptions import ConfigurationError
from filelistgen.io.safe_writer import SafeWriter
from filelistgen.pattern_rules.selection_rules import SelectionRules
from filelistgen.renderers import get_renderer, parse_render_format
from filelistgen.renderers.base_renderer import Renderer
from filelistgen.scan_request import ScanRequest
from filelistgen.types import PathType, RenderFormat

logger = logging.getLogger(__name__)


class FileListGenerator:
    """Generator producing the list of files selected by a scan request.

    Each call performs a fresh scan; no state is kept between invocations. The
    generation steps are:
    1. Scan - walk the base directory and keep the files selected by the patterns
    2. Prefix - optionally prepend "/" to every matched path
    3. Render - format the list as JSON, text, or a JUnit suite
    4. Write - write the rendered text, creating parent directories as needed

    A missing or invalid base directory is detected in step 1, before the output
    file is touched.

    Attributes:
        request (ScanRequest): The scan parameters.
        permission_action (PermissionAction): How unreadable directories are handled.

    Example:
        >>> request = ScanRequest("target", includes=["**/*.java"])  # doctest: +SKIP
        >>> generator = FileListGenerator(request)  # doctest: +SKIP
        >>> generator.generate("target/file-list.json")  # doctest: +SKIP
        ['a/Foo.java']
    """

    def __init__(
        self,
        request: ScanRequest,
        *,
        permission_action: Union[str, PermissionAction] = PermissionAction.IGNORE,
    ) -> None:
        """Initialize the generator.

        Args:
            request: The scan parameters.
            permission_action: How to handle directories that can't be listed.
                Can be "ignore", "warn" or "raise", or a PermissionAction value.

        Raises:
            ConfigurationError: If permission_action is not a valid action.
        """
        # Handle permission_action input
        if isinstance(permission_action, str) and not isinstance(permission_action, PermissionAction):
            try:
                permission_action = PermissionAction(permission_action.lower())
            except ValueError:
                raise ConfigurationError(
                    f"Invalid permission_action: {permission_action}. Must be one of: 'ignore', 'warn', 'raise'"
                )

        self.request = request
        self.permission_action = permission_action
        self._rules = SelectionRules.from_patterns(
            request.includes, request.excludes, case_sensitive=request.case_sensitive
        )

    def create_scanner(self) -> DirectoryScanner:
        """Create a scanner configured from the request.

        Returns:
            A DirectoryScanner for the request's base directory.
        """
        return DirectoryScanner(self.request.base_dir, self._rules, permission_action=self.permission_action)

    def scan(self) -> List[str]:
        """Scan the base directory.

        Returns:
            Relative paths of the selected files in traversal order, without any
            prefix applied.

        Raises:
            ConfigurationError: If the base directory doesn't exist or isn't a directory.
            PermissionError: If a directory can't be listed and permission_action is RAISE.
        """
        return self.create_scanner().scan()

    def apply_prefix(self, paths: Sequence[str]) -> List[str]:
        """Apply the request's slash prefix setting to matched paths.

        Args:
            paths: Paths as returned by scan().

        Returns:
            The paths, each with a leading "/" if prefix_with_slash is set.
        """
        if self.request.prefix_with_slash:
            return ["/" + path for path in paths]
        return list(paths)

    def list_files(self) -> List[str]:
        """Scan the base directory and apply the slash prefix setting.

        Returns:
            The paths exactly as they will be rendered.
        """
        return self.apply_prefix(self.scan())

    def render(
        self,
        paths: Sequence[str],
        render_format: Union[str, RenderFormat] = RenderFormat.JSON,
        *,
        suite_package: str = DEFAULT_SUITE_PACKAGE,
        suite_class: str = DEFAULT_SUITE_CLASS,
        line_separator: str = os.linesep,
    ) -> str:
        """Render paths in the given format.

        The paths are rendered as given; no prefix is applied here.

        Args:
            paths: Paths to render, in order.
            render_format: Output format name or RenderFormat value.
            suite_package: Java package of the generated suite (JUnit format only).
            suite_class: Class name of the generated suite (JUnit format only).
            line_separator: Line terminator. Defaults to os.linesep.

        Returns:
            The rendered text.

        Raises:
            ConfigurationError: If the format is not supported.
        """
        renderer = self._create_renderer(render_format, suite_package, suite_class, line_separator)
        return renderer.render(paths)

    def generate(
        self,
        output_file: Union[int, PathType],
        render_format: Union[str, RenderFormat] = RenderFormat.JSON,
        *,
        suite_package: str = DEFAULT_SUITE_PACKAGE,
        suite_class: str = DEFAULT_SUITE_CLASS,
        line_separator: str = os.linesep,
    ) -> List[str]:
        """Scan, render, and write the file list.

        Args:
            output_file: Destination path, or an open file descriptor.
            render_format: Output format name or RenderFormat value.
            suite_package: Java package of the generated suite (JUnit format only).
            suite_class: Class name of the generated suite (JUnit format only).
            line_separator: Line terminator. Defaults to os.linesep.

        Returns:
            The paths that were written, with any prefix applied.

        Raises:
            ConfigurationError: If the base directory or format is invalid. Nothing
                is written in that case.
            OutputWriteError: If the output can't be created or written.
            PermissionError: If a directory can't be listed and permission_action is RAISE.
        """
        render_format = parse_render_format(render_format)
        renderer = self._create_renderer(render_format, suite_package, suite_class, line_separator)

        logger.info("Creating file list")
        logger.info("Basedir:  %s", self.request.base_dir)
        logger.info("Output:   %s", output_file)
        logger.info("Includes: %s", list(self.request.includes))
        logger.info("Excludes: %s", list(self.request.excludes))
        logger.info("Type:     %s", render_format.value)
        logger.info("Include /: %s", self.request.prefix_with_slash)

        paths = self.list_files()
        logger.info("File list contains %d files", len(paths))

        content = renderer.render(paths)
        with SafeWriter(output_file) as writer:
            writer.write(content)

        return paths

    def _create_renderer(
        self,
        render_format: Union[str, RenderFormat],
        suite_package: str,
        suite_class: str,
        line_separator: str,
    ) -> Renderer:
        render_format = parse_render_format(render_format)
        if render_format == RenderFormat.JUNIT_SUITE:
            return get_renderer(
                render_format, package=suite_package, class_name=suite_class, line_separator=line_separator
            )
        return get_renderer(render_format, line_separator=line_separator)
