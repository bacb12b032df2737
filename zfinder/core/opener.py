# zfinder/core/opener.py

import logging
import shlex
import subprocess
import sys
import threading
from typing import List, Sequence

logger = logging.getLogger(__name__)


def default_open_command() -> List[str]:
    """The command prefix that opens a path in this platform's file browser."""
    if sys.platform == "darwin":
        return ["open"]
    if sys.platform.startswith("win"):
        return ["explorer"]
    return ["xdg-open"]


class SystemOpener:
    """
    Opens paths in the system file browser by spawning a helper command.

    Calls return as soon as the process has been started. The process is
    reaped by a daemon thread, which logs a warning on a non-zero exit.
    Nothing is raised to the caller.
    """

    def __init__(self, command: Sequence[str] | str | None = None):
        """
        Args:
            command: The command prefix to run with the path appended, e.g.
                     ['open', '-R'] or the string 'open -R'. Defaults to the
                     platform's opener.
        """
        if isinstance(command, str):
            command = shlex.split(command)
        self.command = list(command) if command else default_open_command()

    @classmethod
    def from_settings(cls, settings) -> "SystemOpener":
        return cls(settings.open_command)

    def __call__(self, path: str):
        args = [*self.command, path]
        logger.debug(f"Launching: {args}")
        try:
            process = subprocess.Popen(
                args, stdin=subprocess.DEVNULL, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL
            )
        except OSError as e:
            logger.warning(f"Could not launch '{self.command[0]}' to open '{path}': {e}")
            return

        threading.Thread(
            target=self._reap, args=(process, path), name="zfinder-opener", daemon=True
        ).start()

    @staticmethod
    def _reap(process, path: str):
        returncode = process.wait()
        if returncode != 0:
            logger.warning(f"File browser exited with status {returncode} for '{path}'.")
