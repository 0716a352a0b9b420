"""JUnit suite renderer for file lists.

This module renders a file list as the Java source of a JUnit 4 suite class that
runs one test class per matched file.
"""

import os
from typing import List, Sequence

from filelistgen.defaults import DEFAULT_SUITE_CLASS, DEFAULT_SUITE_PACKAGE
from filelistgen.types import RenderFormat

from .base_renderer import Renderer


def to_class_reference(path: str) -> str:
    """Turn a matched path into the entry written to the suite.

    Every path separator becomes a dot, then every occurrence of the text "java" is
    replaced with "class". The second step is a plain substring replacement: it also
    rewrites directory names and identifiers containing "java". Existing suites
    depend on this exact output, so it is kept as is.

    Args:
        path: Matched path, using "/" or the platform separator.

    Returns:
        The suite entry for the path.

    Example:
        >>> to_class_reference("com/example/FooTest.java")
        'com.example.FooTest.class'
        >>> to_class_reference("java/util/ListTest.java")
        'class.util.ListTest.class'
        >>> to_class_reference("/a/Foo.java")
        '.a.Foo.class'
    """
    reference = path.replace("/", ".")
    if os.sep != "/":
        reference = reference.replace(os.sep, ".")
    return reference.replace("java", "class")


class JUnitSuiteRenderer(Renderer):
    """Renderer that writes the file list as a JUnit suite class.

    The generated source has a fixed layout:

        package <package>;

        import org.junit.runner.RunWith;
        import org.junit.runners.Suite.SuiteClasses;

        @RunWith(org.junit.runners.Suite.class)
        @SuiteClasses( {
        \\t<first entry>
        \\t,<second entry>
        } )
        public class <class name> { }

    Each entry is produced by to_class_reference(). Every line, including the last,
    ends with the line separator.

    Attributes:
        package (str): Java package declared by the suite.
        class_name (str): Name of the generated suite class.

    Example:
        >>> renderer = JUnitSuiteRenderer(line_separator="\\n")
        >>> lines = renderer.render(["a/FooTest.java", "a/BarTest.java"]).splitlines()
        >>> lines[0]
        'package n4.quat.selenium.acceptancetest.suites;'
        >>> lines[7:]
        ['\\ta.FooTest.class', '\\t,a.BarTest.class', '} )', 'public class AllTestsSuite { }']
    """

    render_format = RenderFormat.JUNIT_SUITE

    def __init__(
        self,
        package: str = DEFAULT_SUITE_PACKAGE,
        class_name: str = DEFAULT_SUITE_CLASS,
        line_separator: str = os.linesep,
    ) -> None:
        """Initialize the JUnit suite renderer.

        Args:
            package: Java package declared by the suite.
            class_name: Name of the generated suite class.
            line_separator: Line terminator to use. Defaults to os.linesep.
        """
        super().__init__(line_separator)
        self.package = package
        self.class_name = class_name

    def render(self, paths: Sequence[str]) -> str:
        lines: List[str] = [
            f"package {self.package};",
            "",
            "import org.junit.runner.RunWith;",
            "import org.junit.runners.Suite.SuiteClasses;",
            "",
            "@RunWith(org.junit.runners.Suite.class)",
            "@SuiteClasses( {",
        ]
        for index, path in enumerate(paths):
            separator = "" if index == 0 else ","
            lines.append(f"\t{separator}{to_class_reference(path)}")
        lines.append("} )")
        lines.append(f"public class {self.class_name} {{ }}")

        return "".join(line + self.line_separator for line in lines)

    def get_file_extension(self) -> str:
        return ".java"
