"""Unit tests for the JUnit suite renderer."""

from unittest.mock import patch

import pytest

from filelistgen.renderers.junit_renderer import JUnitSuiteRenderer, to_class_reference
from filelistgen.types import RenderFormat

EXPECTED_SUITE = (
    "package n4.quat.selenium.acceptancetest.suites;\n"
    "\n"
    "import org.junit.runner.RunWith;\n"
    "import org.junit.runners.Suite.SuiteClasses;\n"
    "\n"
    "@RunWith(org.junit.runners.Suite.class)\n"
    "@SuiteClasses( {\n"
    "\tcom.example.LoginTest.class\n"
    "\t,com.example.SearchTest.class\n"
    "\t,checkout.PaymentTest.class\n"
    "} )\n"
    "public class AllTestsSuite { }\n"
)


@pytest.fixture
def renderer():
    return JUnitSuiteRenderer(line_separator="\n")


def test_render_full_suite(renderer):
    paths = ["com/example/LoginTest.java", "com/example/SearchTest.java", "checkout/PaymentTest.java"]
    assert renderer.render(paths) == EXPECTED_SUITE


def test_render_empty_list(renderer):
    output = renderer.render([])
    assert output.endswith("@SuiteClasses( {\n} )\npublic class AllTestsSuite { }\n")
    assert "\t" not in output


def test_only_first_entry_has_no_comma(renderer):
    lines = renderer.render(["a/A.java", "a/B.java", "a/C.java"]).split("\n")
    entries = [line for line in lines if line.startswith("\t")]
    assert entries == ["\ta.A.class", "\t,a.B.class", "\t,a.C.class"]


def test_custom_package_and_class():
    renderer = JUnitSuiteRenderer(package="com.acme.suites", class_name="NightlySuite", line_separator="\n")
    lines = renderer.render(["a/FooTest.java"]).split("\n")
    assert lines[0] == "package com.acme.suites;"
    assert lines[-2] == "public class NightlySuite { }"


def test_crlf_line_separator():
    output = JUnitSuiteRenderer(line_separator="\r\n").render(["a/FooTest.java"])
    assert output.endswith("\ta.FooTest.class\r\n} )\r\npublic class AllTestsSuite { }\r\n")
    assert "\n" not in output.replace("\r\n", "")


@pytest.mark.parametrize(
    "path, expected",
    [
        ("a/FooTest.java", "a.FooTest.class"),
        ("FooTest.java", "FooTest.class"),
        # Every "java" substring is replaced, not only the extension
        ("java/util/ListTest.java", "class.util.ListTest.class"),
        ("javascript/Foo.java", "classscript.Foo.class"),
        ("a/Foo.txt", "a.Foo.txt"),
        # A slash prefix turns into a leading dot
        ("/a/FooTest.java", ".a.FooTest.class"),
    ],
)
def test_to_class_reference(path, expected):
    assert to_class_reference(path) == expected


def test_to_class_reference_platform_separator():
    with patch("filelistgen.renderers.junit_renderer.os.sep", "\\"):
        assert to_class_reference("a\\b/FooTest.java") == "a.b.FooTest.class"


def test_metadata(renderer):
    assert renderer.render_format == RenderFormat.JUNIT_SUITE
    assert renderer.get_file_extension() == ".java"
    assert renderer.package == "n4.quat.selenium.acceptancetest.suites"
    assert renderer.class_name == "AllTestsSuite"
