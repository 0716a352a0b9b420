"""JSON renderer for file lists."""

import json
from typing import Sequence

from filelistgen.types import RenderFormat

from .base_renderer import Renderer


class JSONRenderer(Renderer):
    """Renderer that writes the file list as a pretty-printed JSON array.

    Each element is indented by two spaces on its own line. Non-ASCII characters are
    written as-is. The output has no trailing newline, and an empty list renders as
    ``[]``. Elements are always separated by "\\n", independent of line_separator.

    Example:
        >>> print(JSONRenderer().render(["a/Foo.java", "b/Bar.java"]))
        [
          "a/Foo.java",
          "b/Bar.java"
        ]
        >>> JSONRenderer().render([])
        '[]'
    """

    render_format = RenderFormat.JSON

    def render(self, paths: Sequence[str]) -> str:
        return json.dumps(list(paths), indent=2, ensure_ascii=False)

    def get_file_extension(self) -> str:
        """Get the file extension for JSON output.

        Returns:
            str: The string ".json".
        """
        return ".json"
