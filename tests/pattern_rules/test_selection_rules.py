"""Tests for SelectionRules combining include and exclude patterns."""

from unittest.mock import MagicMock

import pytest

from filelistgen.pattern_rules.ant_rules import AntPatternRules
from filelistgen.pattern_rules.base_rules import BasePatternRules
from filelistgen.pattern_rules.selection_rules import SelectionRules


@pytest.mark.parametrize(
    "includes,excludes,path,expected",
    [
        # No includes means everything is included
        ([], [], "a/Foo.java", True),
        (None, None, "deeply/nested/file.bin", True),
        # Includes restrict the selection
        (["**/*.java"], [], "a/Foo.java", True),
        (["**/*.java"], [], "a/Bar.txt", False),
        (["**/*.java", "**/*.txt"], [], "a/Bar.txt", True),
        # Excludes always win
        (["**/*.java"], ["**/internal/**"], "a/internal/Foo.java", False),
        ([], ["**/*.class"], "build/Foo.class", False),
        ([], ["**/*.class"], "src/Foo.java", True),
        (["**"], ["**"], "src/Foo.java", False),
    ],
)
def test_selection(includes, excludes, path, expected):
    rules = SelectionRules.from_patterns(includes, excludes)
    assert rules.matches(path) == expected


def test_selection_case_sensitivity_applies_to_both_sets():
    insensitive = SelectionRules.from_patterns(["**/*.JAVA"], ["**/GEN/**"])
    assert insensitive.matches("src/Foo.java")
    assert not insensitive.matches("gen/Foo.java")

    sensitive = SelectionRules.from_patterns(["**/*.JAVA"], ["**/GEN/**"], case_sensitive=True)
    assert not sensitive.matches("src/Foo.java")
    assert sensitive.matches("gen/Foo.JAVA")


def test_from_patterns_builds_ant_rules():
    rules = SelectionRules.from_patterns(["*.txt"], ["b*"], case_sensitive=True)
    assert isinstance(rules.includes, AntPatternRules)
    assert isinstance(rules.excludes, AntPatternRules)
    assert rules.includes.patterns == ["*.txt"]
    assert rules.excludes.patterns == ["b*"]
    assert rules.includes.case_sensitive and rules.excludes.case_sensitive


def test_selection_consults_rule_objects():
    includes = MagicMock(spec=BasePatternRules)
    includes.has_rules.return_value = True
    includes.matches.return_value = True
    excludes = MagicMock(spec=BasePatternRules)
    excludes.matches.return_value = False

    rules = SelectionRules(includes, excludes)
    assert rules.matches("x.txt")
    includes.matches.assert_called_once_with("x.txt")
    excludes.matches.assert_called_once_with("x.txt")


def test_selection_rejects_invalid_rules():
    with pytest.raises(TypeError) as excinfo:
        SelectionRules("**/*.java", AntPatternRules())  # type: ignore[arg-type]
    assert "includes must implement BasePatternRules" in str(excinfo.value)

    with pytest.raises(TypeError) as excinfo:
        SelectionRules(AntPatternRules(), None)  # type: ignore[arg-type]
    assert "excludes must implement BasePatternRules" in str(excinfo.value)
