"""Immutable description of a single directory scan."""

from dataclasses import dataclass, field
from typing import Optional, Sequence, Tuple

from filelistgen.defaults import DEFAULT_BASE_DIR
from filelistgen.types import PathType


@dataclass(frozen=True)
class ScanRequest:
    """Parameters of one scan, fixed at construction.

    Attributes:
        base_dir: Root of the directory tree to scan.
        includes: Ant-style include patterns. Empty means every file is included.
        excludes: Ant-style exclude patterns.
        case_sensitive: Whether pattern matching distinguishes case.
        prefix_with_slash: Whether every matched path is rendered with a leading "/".

    Example:
        >>> request = ScanRequest("target", includes=["**/*.java"])
        >>> request.includes
        ('**/*.java',)
        >>> request.case_sensitive
        False
    """

    base_dir: PathType = DEFAULT_BASE_DIR
    includes: Sequence[str] = field(default_factory=tuple)
    excludes: Sequence[str] = field(default_factory=tuple)
    case_sensitive: bool = False
    prefix_with_slash: bool = False

    def __post_init__(self) -> None:
        # Freeze pattern lists so the request cannot change after construction
        object.__setattr__(self, "includes", _as_tuple(self.includes))
        object.__setattr__(self, "excludes", _as_tuple(self.excludes))


def _as_tuple(patterns: Optional[Sequence[str]]) -> Tuple[str, ...]:
    if patterns is None:
        return ()
    if isinstance(patterns, str):
        return (patterns,)
    return tuple(patterns)
