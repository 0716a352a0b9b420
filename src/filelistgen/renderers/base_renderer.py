"""Renderer base class defining the interface for file list formatting.

This module provides the abstract base class that defines how a list of matched
paths is turned into the text written to the output file.
"""

import os
from abc import ABC, abstractmethod
from typing import Sequence

from filelistgen.types import RenderFormat


class Renderer(ABC):
    """Abstract base class defining the interface for file list renderers.

    This class implements the Strategy pattern for rendering a file list in different
    formats. Each concrete renderer turns the complete, ordered list of paths into
    one string. Renderers never reorder, filter, or prefix the paths they are given.

    Attributes:
        line_separator (str): Line terminator used between lines of output. Defaults
            to the platform line terminator.

    Example:
        >>> class CsvRenderer(Renderer):
        ...     render_format = RenderFormat.TEXT
        ...
        ...     def render(self, paths: Sequence[str]) -> str:
        ...         return ",".join(paths)
        ...
        ...     def get_file_extension(self) -> str:
        ...         return ".csv"
        >>> CsvRenderer().render(["a.txt", "b/c.txt"])
        'a.txt,b/c.txt'
    """

    render_format: RenderFormat

    def __init__(self, line_separator: str = os.linesep) -> None:
        """Initialize the renderer.

        Args:
            line_separator: Line terminator to use. Defaults to os.linesep.
        """
        self.line_separator = line_separator

    @abstractmethod
    def render(self, paths: Sequence[str]) -> str:
        """Render the complete file list.

        Args:
            paths: Matched paths in the order they should appear.

        Returns:
            The rendered output text.
        """
        pass

    @abstractmethod
    def get_file_extension(self) -> str:
        """Get the conventional file extension for this output format.

        Returns:
            The file extension including the leading dot (e.g., ".json", ".txt").
        """
        pass
