"""Permission action enum for handling permission errors during directory traversal."""

from enum import Enum


class PermissionAction(str, Enum):
    """Action to take when a directory cannot be listed during traversal.

    Values:
        IGNORE: Skip the directory silently (default behavior)
        WARN: Skip the directory and log a warning
        RAISE: Raise a PermissionError immediately when access is denied
    """

    IGNORE = "ignore"
    WARN = "warn"
    RAISE = "raise"
