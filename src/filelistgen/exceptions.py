from typing import Optional

from filelistgen.types import PathType


class ConfigurationError(ValueError):
    """
    Exception raised when a file list invocation is configured incorrectly.

    This is raised before anything is written, most commonly because the base
    directory to scan does not exist or is not a directory. It is also used for
    unknown output format or permission action names.

    Example:
        >>> error = ConfigurationError("Base directory does not exist: target")
        >>> str(error)
        'Base directory does not exist: target'
    """

    pass


class OutputWriteError(OSError):
    """
    Exception raised when the rendered file list cannot be written.

    This covers failing to create the parent directories of the output file as well
    as failing to open or write the file itself. The underlying ``OSError`` is
    available through ``__cause__``.

    Attributes:
        path (str): The output path that could not be written.

    Example:
        >>> error = OutputWriteError("out/list.json", "Permission denied")
        >>> str(error)
        'Could not write output file out/list.json: Permission denied'
    """

    def __init__(self, path: PathType, reason: Optional[str] = None) -> None:
        """
        Initialize the exception with the output path and an optional reason.

        Args:
            path: The output path that could not be written.
            reason: Short description of what went wrong, usually the message of
                the underlying ``OSError``.
        """
        self.path = str(path)
        message = f"Could not write output file {self.path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
