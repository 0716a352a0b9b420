"""Implementation of pattern rules using Ant-style glob syntax."""

import re
from typing import List, Optional, Sequence, Tuple, Type

from pathspec import PathSpec, RegexPattern

from .base_rules import BasePatternRules


def normalize_ant_pattern(pattern: str) -> List[str]:
    """Split an Ant-style pattern into its path segments.

    Backslashes are treated as separators, a trailing separator means everything
    below that directory, empty segments (including a leading "/") are dropped, and
    runs of "**" segments are collapsed into one.

    Args:
        pattern: Ant-style pattern such as "**/*.java" or "lib/".

    Returns:
        The pattern's segments.

    Example:
        >>> normalize_ant_pattern("src\\\\main/**/**/*.java")
        ['src', 'main', '**', '*.java']
        >>> normalize_ant_pattern("/lib/")
        ['lib', '**']
    """
    normalized = pattern.replace("\\", "/")
    if normalized.endswith("/"):
        normalized += "**"

    segments: List[str] = []
    for segment in normalized.split("/"):
        if not segment:
            continue
        if segment == "**" and segments and segments[-1] == "**":
            continue
        segments.append(segment)
    return segments


def _translate_segment(segment: str) -> str:
    """Translate one path segment, where "*" and "?" never cross a separator."""
    regex = []
    for char in segment:
        if char == "*":
            regex.append("[^/]*")
        elif char == "?":
            regex.append("[^/]")
        else:
            regex.append(re.escape(char))
    return "".join(regex)


def ant_to_regex(pattern: str) -> Optional[str]:
    """Translate an Ant-style pattern into an anchored regular expression.

    Args:
        pattern: Ant-style pattern.

    Returns:
        The regular expression, or None for a pattern without any segment.

    Example:
        >>> ant_to_regex("**/*.java")
        '^(?:.*/)?[^/]*\\\\.java$'
        >>> ant_to_regex("a/**/b")
        '^a(?:/.*)?/b$'
        >>> ant_to_regex("")
    """
    segments = normalize_ant_pattern(pattern)
    if not segments:
        return None

    count = len(segments)
    regex = []
    for index, segment in enumerate(segments):
        if segment == "**":
            if count == 1:
                regex.append(".*")
            elif index == 0:
                regex.append("(?:.*/)?")
            elif index == count - 1:
                regex.append("(?:/.*)?")
            else:
                regex.append("(?:/.*)?/")
        else:
            if index > 0 and segments[index - 1] != "**":
                regex.append("/")
            regex.append(_translate_segment(segment))

    return "^" + "".join(regex) + "$"


class AntPattern(RegexPattern):  # type: ignore
    """A pathspec pattern compiled from Ant-style glob syntax.

    Unlike gitwildmatch patterns, an Ant pattern only matches a path as a whole: a
    pattern matching a directory name does not match the files inside it.
    """

    @classmethod
    def pattern_to_regex(cls, pattern: str) -> Tuple[Optional[str], Optional[bool]]:
        regex = ant_to_regex(pattern)
        if regex is None:
            # A null pattern, ignored by PathSpec
            return None, None
        return regex, True


class CaseInsensitiveAntPattern(AntPattern):
    """An Ant pattern that ignores case."""

    @classmethod
    def pattern_to_regex(cls, pattern: str) -> Tuple[Optional[str], Optional[bool]]:
        regex, include = super().pattern_to_regex(pattern)
        if regex is None:
            return None, None
        return "(?i)" + regex, include


class AntPatternRules(BasePatternRules):
    """Rules matching paths against Ant-style glob patterns.

    Supported syntax:
    - ``*`` matches any run of characters within one path segment
    - ``?`` matches exactly one character other than a separator
    - ``**`` as a whole segment matches zero or more path segments
    - a trailing ``/`` matches everything below a directory (``lib/`` is ``lib/**``)
    - ``\\`` is accepted as a separator and a leading ``/`` is ignored

    Patterns are anchored at the scanned directory, so ``*.txt`` only matches files
    at the top level while ``**/*.txt`` matches them at any depth. A path matches
    when it matches at least one pattern.

    Patterns are compiled into AntPattern objects and evaluated by a pathspec
    PathSpec.

    Attributes:
        case_sensitive (bool): Whether matching distinguishes case.
        spec (PathSpec): Compiled pattern matcher from the pathspec library.

    Example:
        >>> rules = AntPatternRules(["src/**/*.JAVA"])
        >>> rules.matches("src/a/Foo.java")
        True
        >>> AntPatternRules(["src/**/*.JAVA"], case_sensitive=True).matches("src/a/Foo.java")
        False
        >>> AntPatternRules(["src/*"]).matches("src/a/Foo.java")
        False
    """

    def __init__(self, patterns: Optional[Sequence[str]] = None, case_sensitive: bool = False):
        """Initialize AntPatternRules.

        Args:
            patterns: Ant-style patterns. Blank patterns are ignored; "/" alone selects everything.
            case_sensitive: Whether matching distinguishes case. Defaults to False.
        """
        self.case_sensitive = case_sensitive
        self._pattern_class: Type[AntPattern] = AntPattern if case_sensitive else CaseInsensitiveAntPattern
        self._patterns: List[str] = []
        self.spec = PathSpec.from_lines(self._pattern_class, [])

        for pattern in patterns or ():
            self.add_rule(pattern)

    @property
    def patterns(self) -> List[str]:
        """The Ant-style patterns in the order they were added."""
        return list(self._patterns)

    def matches(self, path: str) -> bool:
        """Check if a path matches any of the configured patterns.

        Args:
            path: Path relative to the scanned directory, using "/" separators.

        Returns:
            bool: True if at least one pattern matches.
        """
        return bool(self.spec.match_file(path))

    def add_rule(self, rule: str) -> None:
        """Add a single Ant-style pattern.

        Args:
            rule: Pattern such as "**/*.java". Blank patterns are ignored, and "/"
                alone means "**", selecting every path.

        Example:
            >>> rules = AntPatternRules()
            >>> rules.add_rule("build/")
            >>> rules.matches("build/classes/Foo.class")
            True
            >>> rules.matches("src/build/Foo.java")
            False
        """
        if not rule.strip() or not normalize_ant_pattern(rule):
            return

        # Ensure patterns is a list that supports append
        if not hasattr(self.spec.patterns, "append"):
            self.spec.patterns = list(self.spec.patterns)

        self.spec.patterns.append(self._pattern_class(rule))
        self._patterns.append(rule)

    def has_rules(self) -> bool:
        """Check whether any pattern has been added.

        Returns:
            bool: True if at least one pattern is configured.
        """
        return bool(self._patterns)
