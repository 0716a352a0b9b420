"""Plain text renderer for file lists."""

from typing import Sequence

from filelistgen.types import RenderFormat

from .base_renderer import Renderer


class TextRenderer(Renderer):
    """Renderer that writes one path per line.

    Every path, including the last, is followed by the line separator. An empty list
    renders as an empty string.

    Example:
        >>> TextRenderer(line_separator="\\n").render(["a/Foo.java", "b.txt"])
        'a/Foo.java\\nb.txt\\n'
        >>> TextRenderer().render([])
        ''
    """

    render_format = RenderFormat.TEXT

    def render(self, paths: Sequence[str]) -> str:
        return "".join(path + self.line_separator for path in paths)

    def get_file_extension(self) -> str:
        return ".txt"
