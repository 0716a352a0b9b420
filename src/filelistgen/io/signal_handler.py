"""Signal handling for command-line runs.

SIGINT and SIGPIPE are recorded instead of interrupting the program. The next
write then stops with BrokenPipeError, and the command exits with the status a
shell expects for the signal.
"""

import atexit
import os
import signal
import sys
from types import FrameType
from typing import Any, Dict, Optional, Set

# SIGPIPE does not exist on Windows
_SIGPIPE = getattr(signal, "SIGPIPE", None)

# Exit statuses, in order of precedence
_EXIT_CODES = [(_SIGPIPE, 141), (signal.SIGINT, 130)]


class SignalHandler:
    """Records SIGINT and SIGPIPE deliveries.

    Attributes:
        received: Numbers of the signals received since install().
    """

    def __init__(self) -> None:
        self.received: Set[int] = set()
        self._previous: Dict[int, Any] = {}

    def install(self) -> None:
        """Route SIGINT and SIGPIPE to this handler and redirect stdout at exit."""
        for signum in (_SIGPIPE, signal.SIGINT):
            if signum is not None:
                self._previous[signum] = signal.signal(signum, self.handle)
        atexit.register(self.silence_stdout)

    def handle(self, signum: int, frame: Optional[FrameType]) -> None:
        self.received.add(signum)
        # A second delivery gets the previous behaviour
        signal.signal(signum, self._previous.get(signum, signal.SIG_DFL))

    def interrupted(self) -> bool:
        return bool(self.received)

    def exit_code(self) -> Optional[int]:
        """Get the exit status for the received signals.

        Returns:
            141 after SIGPIPE, 130 after SIGINT, or None if neither was received.
        """
        for signum, code in _EXIT_CODES:
            if signum is not None and signum in self.received:
                return code
        return None

    def silence_stdout(self) -> None:
        """Point stdout at the null device after a signal, so shutdown can't fail on a closed pipe."""
        if self.interrupted():
            devnull = os.open(os.devnull, os.O_WRONLY)
            os.dup2(devnull, sys.stdout.fileno())


signal_handler = SignalHandler()
