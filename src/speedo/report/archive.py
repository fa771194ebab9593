"""LogArchiver -- keeps a copy of each rendered report on disk.

Reports land in a dedicated log directory, one file per save, named
after the local time of the save:

    ~/.speedo/log/20261019-143205.log

The directory and the clock are injected so the archiver can be pointed
at a temporary directory and a fixed time in tests. Only the default
directory looks at the user's home.
"""
from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

log = logging.getLogger(__name__)

FILE_NAME_FORMAT = "%Y%m%d-%H%M%S"
FILE_SUFFIX = ".log"


def default_log_dir() -> Path:
    """~/.speedo/log for the current user."""
    return Path.home() / ".speedo" / "log"


class LogArchiver:
    """Writes report text to <log_dir>/<YYYYmmdd-HHMMSS>.log.

    Args:
        log_dir: directory for the log files (default: ~/.speedo/log);
            created on the first save
        clock: returns the current local time (default: datetime.now)

    Two saves within the same second target the same file; the later
    one wins.
    """

    def __init__(
        self,
        log_dir: Path | str | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._log_dir = Path(log_dir) if log_dir is not None else default_log_dir()
        self._clock = clock or datetime.now

    @property
    def log_dir(self) -> Path:
        return self._log_dir

    def log_path(self) -> Path:
        """Path the next save() would write to."""
        stamp = self._clock().strftime(FILE_NAME_FORMAT)
        return self._log_dir / f"{stamp}{FILE_SUFFIX}"

    def save(self, report_text: str) -> Path:
        """Persist report_text and return the file it was written to.

        OSError from creating the directory or writing the file
        propagates to the caller.
        """
        path = self.log_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(report_text, encoding="utf-8")
        log.info("Archived profiling report to %s", path)
        return path
