"""Unit tests for the DirectoryScanner class."""

import errno
import logging
import os
from pathlib import Path
from unittest.mock import patch

import pytest

from filelistgen.directory_scanner.directory_scanner import DirectoryScanner
from filelistgen.directory_scanner.permission_action import PermissionAction
from filelistgen.exceptions import ConfigurationError
from filelistgen.pattern_rules.ant_rules import AntPatternRules
from filelistgen.pattern_rules.selection_rules import SelectionRules

LISTDIR = "filelistgen.directory_scanner.directory_scanner.os.listdir"


def all_files(root):
    """Collect every file below root with os.walk, as "/"-separated relative paths."""
    found = set()
    for dirpath, _dirnames, filenames in os.walk(root):
        for filename in filenames:
            relative = Path(dirpath, filename).relative_to(root)
            found.add(relative.as_posix())
    return found


def test_scanner_initialization(project_tree):
    scanner = DirectoryScanner(str(project_tree))
    assert scanner.root_path == Path(project_tree)
    assert scanner.rules is None
    assert scanner.permission_action == PermissionAction.IGNORE


def test_scan_without_rules_lists_every_file(project_tree):
    scanner = DirectoryScanner(project_tree)
    result = scanner.scan()

    assert sorted(result) == sorted(all_files(project_tree))
    assert len(result) == len(set(result))
    # Directories are traversed but never reported
    assert "empty_dir" not in result
    assert "a" not in result


def test_scan_with_includes(project_tree):
    scanner = DirectoryScanner(project_tree, SelectionRules.from_patterns(["**/*.java"]))
    assert sorted(scanner.scan()) == ["Main.java", "a/Foo.java", "a/b/BazTest.java"]


def test_scan_with_includes_and_excludes(project_tree):
    rules = SelectionRules.from_patterns(["**/*.java", "**/*.md"], ["**/b/**", "docs/guide/"])
    scanner = DirectoryScanner(project_tree, rules)
    assert sorted(scanner.scan()) == ["Main.java", "a/Foo.java", "docs/README.md"]


def test_scan_matches_only_included_files(project_tree):
    """With no excludes the result is exactly the set of files matching an include."""
    includes = ["**/*.java", "docs/*"]
    include_rules = AntPatternRules(includes)
    expected = {path for path in all_files(project_tree) if include_rules.matches(path)}

    scanner = DirectoryScanner(project_tree, SelectionRules.from_patterns(includes))
    assert set(scanner.scan()) == expected


def test_scan_never_returns_excluded_files(project_tree):
    excludes = ["a/**", "**/*.class"]
    exclude_rules = AntPatternRules(excludes)

    result = DirectoryScanner(project_tree, SelectionRules.from_patterns(None, excludes)).scan()
    assert result
    assert not [path for path in result if exclude_rules.matches(path)]


def test_scan_case_sensitivity(project_tree):
    insensitive = DirectoryScanner(project_tree, SelectionRules.from_patterns(["**/*.md"]))
    assert sorted(insensitive.scan()) == ["docs/README.md", "docs/guide/Intro.MD"]

    sensitive = DirectoryScanner(project_tree, SelectionRules.from_patterns(["**/*.md"], case_sensitive=True))
    assert sensitive.scan() == ["docs/README.md"]


def test_scan_follows_listing_order_depth_first(tmp_path):
    (tmp_path / "a").mkdir()
    for relative in ("a/x.txt", "a/y.txt", "b.txt", "c.txt"):
        (tmp_path / relative).write_text("x")

    real_listdir = os.listdir

    def reversed_listdir(path):
        return sorted(real_listdir(path), reverse=True)

    with patch(LISTDIR, side_effect=reversed_listdir):
        result = DirectoryScanner(tmp_path).scan()

    assert result == ["c.txt", "b.txt", "a/y.txt", "a/x.txt"]


def test_paths_use_forward_slashes(project_tree):
    result = DirectoryScanner(project_tree).scan()
    assert "a/b/BazTest.java" in result
    assert not [path for path in result if "\\" in path or path.startswith("/")]


def test_iterate_files_is_lazy(project_tree):
    iterator = DirectoryScanner(project_tree).iterate_files()
    first = next(iterator)
    assert first in all_files(project_tree)


def test_get_file_count(project_tree):
    scanner = DirectoryScanner(project_tree, SelectionRules.from_patterns(["**/*.java"]))
    assert scanner.get_file_count() == 3


def test_empty_directory(tmp_path):
    assert DirectoryScanner(tmp_path).scan() == []


def test_missing_root_raises_configuration_error(tmp_path):
    scanner = DirectoryScanner(tmp_path / "missing")
    with pytest.raises(ConfigurationError) as excinfo:
        scanner.scan()
    assert "Base directory does not exist" in str(excinfo.value)


def test_file_root_raises_configuration_error(tmp_path):
    file_path = tmp_path / "file.txt"
    file_path.write_text("x")
    with pytest.raises(ConfigurationError) as excinfo:
        DirectoryScanner(file_path).scan()
    assert "Base directory is not a directory" in str(excinfo.value)


@pytest.fixture
def tree_with_symlinks(tmp_path):
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "Main.java").write_text("class Main {}")
    try:
        os.symlink(tmp_path / "src", tmp_path / "linked_src")
        os.symlink(tmp_path / "src" / "Main.java", tmp_path / "Linked.java")
        os.symlink(tmp_path / "nowhere.java", tmp_path / "Dangling.java")
    except (OSError, NotImplementedError):
        pytest.skip("Symlinks are not supported on this platform")
    return tmp_path


def test_symlinks_are_followed(tree_with_symlinks):
    result = DirectoryScanner(tree_with_symlinks).scan()
    assert sorted(result) == ["Linked.java", "linked_src/Main.java", "src/Main.java"]


def test_dangling_symlinks_are_skipped(tree_with_symlinks):
    assert "Dangling.java" not in DirectoryScanner(tree_with_symlinks).scan()


@pytest.fixture
def unreadable_listdir(project_tree):
    """Make the "a" directory of the project tree unreadable."""
    real_listdir = os.listdir
    blocked = project_tree / "a"

    def fake_listdir(path):
        if Path(path) == blocked:
            raise PermissionError(13, "Permission denied", str(path))
        return real_listdir(path)

    with patch(LISTDIR, side_effect=fake_listdir):
        yield


def test_unreadable_directory_ignored(project_tree, unreadable_listdir, caplog):
    with caplog.at_level(logging.WARNING):
        result = DirectoryScanner(project_tree).scan()

    assert "Main.java" in result
    assert not [path for path in result if path.startswith("a/")]
    assert not caplog.records


def test_unreadable_directory_warns(project_tree, unreadable_listdir, caplog):
    with caplog.at_level(logging.WARNING, logger="filelistgen.directory_scanner.directory_scanner"):
        result = DirectoryScanner(project_tree, permission_action=PermissionAction.WARN).scan()

    assert "Main.java" in result
    assert not [path for path in result if path.startswith("a/")]
    assert "Skipping unreadable directory" in caplog.text


def test_unreadable_directory_raises(project_tree, unreadable_listdir):
    scanner = DirectoryScanner(project_tree, permission_action=PermissionAction.RAISE)
    with pytest.raises(PermissionError) as excinfo:
        scanner.scan()
    assert "Access denied to" in str(excinfo.value)


@pytest.fixture
def unstatable_entry(project_tree):
    """Make the "a" entry of the project tree fail to stat, though its parent lists fine."""
    real_stat = Path.stat
    blocked = project_tree / "a"

    def fake_stat(path, *args, **kwargs):
        if path == blocked:
            raise PermissionError(errno.EACCES, "Permission denied", str(path))
        return real_stat(path, *args, **kwargs)

    with patch.object(Path, "stat", autospec=True, side_effect=fake_stat):
        yield blocked


def test_unstatable_entry_ignored(project_tree, unstatable_entry, caplog):
    with caplog.at_level(logging.WARNING):
        result = DirectoryScanner(project_tree).scan()

    assert "Main.java" in result
    assert "docs/README.md" in result
    assert not [path for path in result if path.startswith("a/")]
    assert not caplog.records


def test_unstatable_entry_warns(project_tree, unstatable_entry, caplog):
    with caplog.at_level(logging.WARNING, logger="filelistgen.directory_scanner.directory_scanner"):
        result = DirectoryScanner(project_tree, permission_action=PermissionAction.WARN).scan()

    assert "Main.java" in result
    assert "Skipping unreadable entry" in caplog.text
    assert str(unstatable_entry) in caplog.text


def test_unstatable_entry_raises(project_tree, unstatable_entry):
    scanner = DirectoryScanner(project_tree, permission_action=PermissionAction.RAISE)
    with pytest.raises(PermissionError) as excinfo:
        scanner.scan()
    assert f"Access denied to {unstatable_entry}" in str(excinfo.value)
