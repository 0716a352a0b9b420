from enum import Enum
from os import PathLike
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class RenderFormat(str, Enum):
    """Enumeration of the supported output formats for a file list.

    The enum values are the spellings accepted on the command line.

    Attributes:
        JSON: Pretty-printed JSON array of paths
        TEXT: One path per line
        JUNIT_SUITE: JUnit suite class listing one test class per path
    """

    JSON = "json"
    TEXT = "text"
    JUNIT_SUITE = "junit"
