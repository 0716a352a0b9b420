"""Safe output writing utilities for filelistgen.

This module provides a writing interface that creates missing parent directories,
handles signals and interruptions gracefully, and always releases its file handle.
"""

import errno
import logging
import os
import types
from pathlib import Path
from typing import IO, Optional, Type, Union

from filelistgen.exceptions import OutputWriteError
from filelistgen.io.signal_handler import signal_handler

logger = logging.getLogger(__name__)


class SafeWriter:
    """Safe writing interface for file list output.

    Output goes either to an already open file descriptor (such as standard output)
    or to a file path. For a path, all missing parent directories are created and
    the file is opened for writing (truncating it) when the writer is constructed.

    Errors while creating directories, opening, or writing are raised as
    OutputWriteError. Errors while closing are logged and never raised, because the
    outcome of the write is already decided at that point.

    Attributes:
        file: Either a file path or file descriptor for output.
        fd: The actual file descriptor being written to.

    Example:
        >>> with SafeWriter("target/file-list.json") as writer:  # doctest: +SKIP
        ...     writer.write("[]")
    """

    def __init__(self, file: Union[int, str, os.PathLike]):
        """Initialize the safe writer.

        Args:
            file: Either a file descriptor (int) or a path to write to.

        Raises:
            OutputWriteError: If a parent directory can't be created or the file
                can't be opened.
            TypeError: If file is neither an int nor a path.
        """
        self.file = file
        self._closed = False
        self._file_obj: Optional[IO[str]] = None

        if isinstance(file, int):
            # It's already a file descriptor
            self.fd = file
        elif isinstance(file, (str, os.PathLike)):
            path = Path(file)
            try:
                path.parent.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise OutputWriteError(path, f"cannot create directory {path.parent}: {e.strerror or e}") from e
            try:
                self._file_obj = path.open("w", encoding="utf-8")
            except OSError as e:
                raise OutputWriteError(path, e.strerror or str(e)) from e
            self.fd = self._file_obj.fileno()
        else:
            raise TypeError(f"Expected int, str, or PathLike, got {type(file).__name__}")

    def write(self, data: str) -> None:
        """Safely write data with signal checking.

        Args:
            data: String data to write, encoded as UTF-8. Surrogate escapes are
                written back as the bytes they stand for.

        Raises:
            BrokenPipeError: If SIGPIPE/SIGINT was received or the pipe is broken.
            OutputWriteError: If the data can't be encoded or an I/O error occurs
                during writing.
            ValueError: If attempting to write to a closed writer.
        """
        if self._closed:
            raise ValueError("Cannot write to closed SafeWriter")

        if signal_handler.interrupted():
            raise BrokenPipeError()

        # Surrogate escapes from os.listdir() are written back as their original bytes
        try:
            payload = data.encode("utf-8", errors="surrogateescape")
        except UnicodeEncodeError as e:
            raise OutputWriteError(self._describe(), f"cannot encode output: {e.reason}") from e

        try:
            # os.write may accept fewer bytes than requested
            while payload:
                written = os.write(self.fd, payload)
                payload = payload[written:]
        except OSError as e:
            if e.errno == errno.EPIPE:
                raise BrokenPipeError()
            raise OutputWriteError(self._describe(), e.strerror or str(e)) from e

    def close(self) -> None:
        """Close the file if it was opened by this class.

        The writer is marked as closed even if closing the underlying file fails;
        such failures are logged rather than raised.
        """
        if self._closed:
            return

        self._closed = True
        if self._file_obj is not None:
            try:
                self._file_obj.close()
            except OSError:
                logger.error("Could not close output file %s", self._describe(), exc_info=True)

    def _describe(self) -> str:
        if isinstance(self.file, int):
            return f"<fd {self.file}>"
        return str(self.file)

    def __enter__(self) -> "SafeWriter":
        """Enter the context manager.

        Returns:
            self: The SafeWriter instance for use in the with block.
        """
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[types.TracebackType],
    ) -> None:
        """Exit the context manager and close resources.

        Args:
            exc_type: The exception type, if an exception was raised.
            exc_val: The exception value, if an exception was raised.
            exc_tb: The exception traceback, if an exception was raised.
        """
        self.close()
