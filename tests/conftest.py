"""Test configuration and fixtures for filelistgen."""

import pytest


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


PROJECT_FILES = [
    "Main.java",
    "a/Foo.java",
    "a/Bar.txt",
    "a/b/BazTest.java",
    "docs/README.md",
    "docs/guide/Intro.MD",
    "build/classes/Foo.class",
]


@pytest.fixture
def project_tree(tmp_path):
    """Create a small source tree with Java sources, documents, and build output."""
    base_dir = tmp_path / "project"
    for relative in PROJECT_FILES:
        path = base_dir / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(f"content of {relative}\n")
    (base_dir / "empty_dir").mkdir()
    return base_dir
