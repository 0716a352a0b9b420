"""Combination of include and exclude patterns."""

from typing import Optional, Sequence

from .ant_rules import AntPatternRules
from .base_rules import BasePatternRules


class SelectionRules(BasePatternRules):
    """Rules that select a path using an include set and an exclude set.

    A path is selected when it matches at least one include pattern (or no include
    patterns are configured at all) and matches none of the exclude patterns.
    Excludes always win over includes.

    Attributes:
        includes (BasePatternRules): Rules a path must match to be selected.
        excludes (BasePatternRules): Rules that reject a path.

    Example:
        >>> rules = SelectionRules.from_patterns(["**/*.java"], ["**/internal/**"])
        >>> rules.matches("a/Foo.java")
        True
        >>> rules.matches("a/internal/Foo.java")
        False
        >>> rules.matches("a/Bar.txt")
        False
        >>> SelectionRules.from_patterns().matches("anything/at/all.txt")
        True
    """

    def __init__(self, includes: BasePatternRules, excludes: BasePatternRules):
        """Initialize selection rules.

        Args:
            includes: Rules a path must match. Rules reporting has_rules() == False
                select every path.
            excludes: Rules that reject a path.

        Raises:
            TypeError: If either argument doesn't implement BasePatternRules.
        """
        for name, rule in (("includes", includes), ("excludes", excludes)):
            if not isinstance(rule, BasePatternRules):
                raise TypeError(f"{name} must implement BasePatternRules, got {type(rule)}")

        self.includes = includes
        self.excludes = excludes

    @classmethod
    def from_patterns(
        cls,
        includes: Optional[Sequence[str]] = None,
        excludes: Optional[Sequence[str]] = None,
        case_sensitive: bool = False,
    ) -> "SelectionRules":
        """Build selection rules from Ant-style pattern lists.

        Args:
            includes: Include patterns. None or empty selects every file.
            excludes: Exclude patterns.
            case_sensitive: Whether matching distinguishes case.

        Returns:
            A new SelectionRules instance.
        """
        return cls(
            AntPatternRules(includes, case_sensitive=case_sensitive),
            AntPatternRules(excludes, case_sensitive=case_sensitive),
        )

    def matches(self, path: str) -> bool:
        """Check if a path is selected.

        Args:
            path: Path relative to the scanned directory, using "/" separators.

        Returns:
            True if the path is included and not excluded.
        """
        if self.includes.has_rules() and not self.includes.matches(path):
            return False
        return not self.excludes.matches(path)
