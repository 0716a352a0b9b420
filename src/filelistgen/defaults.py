"""Default values for a file list invocation."""

from filelistgen.types import RenderFormat

DEFAULT_BASE_DIR = "./target/"
DEFAULT_OUTPUT_FILE = "./target/file-list.json"
DEFAULT_RENDER_FORMAT = RenderFormat.JSON

# Names used by the generated JUnit suite
DEFAULT_SUITE_PACKAGE = "n4.quat.selenium.acceptancetest.suites"
DEFAULT_SUITE_CLASS = "AllTestsSuite"

# Output path meaning "write to standard output" on the command line
STDOUT_MARKER = "-"
