from abc import ABC, abstractmethod


class BasePatternRules(ABC):
    """
    Abstract base class defining the interface for path matching rules.

    Concrete rules decide whether a path relative to the scanned directory matches.
    Paths are always given with forward slashes (/) as separators, regardless of
    the host platform.

    Example:
        >>> from filelistgen.pattern_rules.ant_rules import AntPatternRules
        >>> rules = AntPatternRules(["**/*.java"])
        >>> rules.matches("a/Foo.java")
        True
        >>> rules.matches("a/Bar.txt")
        False
    """

    @abstractmethod
    def matches(self, path: str) -> bool:
        """
        Determine if a given path matches these rules.

        Args:
            path (str): Path relative to the scanned directory, using "/" separators.

        Returns:
            bool: True if the path matches, False otherwise.

        Example:
            >>> class SuffixRules(BasePatternRules):
            ...     def __init__(self, suffix: str):
            ...         self.suffix = suffix
            ...     def matches(self, path: str) -> bool:
            ...         return path.endswith(self.suffix)
            >>> SuffixRules(".py").matches("pkg/mod.py")
            True
        """
        pass

    def add_rule(self, rule: str) -> None:
        """
        Add a single pattern directly.

        Rule types that are not pattern based keep this default implementation.

        Args:
            rule (str): The pattern to add.

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")

    def has_rules(self) -> bool:
        """
        Report whether any rule is configured.

        Returns:
            bool: True unless the implementation knows it is empty.
        """
        return True
