"""Renderers turning a file list into output text."""

from typing import Any, Dict, Type, Union

from filelistgen.exceptions import ConfigurationError
from filelistgen.types import RenderFormat

from .base_renderer import Renderer
from .json_renderer import JSONRenderer
from .junit_renderer import JUnitSuiteRenderer
from .text_renderer import TextRenderer

RENDERERS: Dict[RenderFormat, Type[Renderer]] = {
    RenderFormat.JSON: JSONRenderer,
    RenderFormat.TEXT: TextRenderer,
    RenderFormat.JUNIT_SUITE: JUnitSuiteRenderer,
}


def parse_render_format(value: Union[str, RenderFormat]) -> RenderFormat:
    """Convert a format name such as "json" into a RenderFormat.

    Args:
        value: Format name (case-insensitive) or RenderFormat member.

    Returns:
        The matching RenderFormat.

    Raises:
        ConfigurationError: If the name doesn't denote a supported format.
    """
    if isinstance(value, RenderFormat):
        return value
    try:
        return RenderFormat(value.lower())
    except ValueError:
        supported = ", ".join(f"'{f.value}'" for f in RenderFormat)
        raise ConfigurationError(f"Unsupported output type: {value}. Must be one of: {supported}")


def get_renderer(render_format: Union[str, RenderFormat], **options: Any) -> Renderer:
    """Create the renderer for a format.

    Args:
        render_format: Format name or RenderFormat member.
        **options: Keyword arguments passed to the renderer's constructor.

    Returns:
        A renderer instance for the format.

    Raises:
        ConfigurationError: If the format is not supported.

    Example:
        >>> type(get_renderer("junit")).__name__
        'JUnitSuiteRenderer'
    """
    return RENDERERS[parse_render_format(render_format)](**options)


__all__ = [
    "JSONRenderer",
    "JUnitSuiteRenderer",
    "RENDERERS",
    "Renderer",
    "TextRenderer",
    "get_renderer",
    "parse_render_format",
]
