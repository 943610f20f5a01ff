"""Daily rolling file writer with a stable ``current`` symlink."""

import os
import threading
from datetime import date, datetime
from typing import Callable, Optional

from logsink.clock import local_now, next_midnight

CURRENT_LINK = "current"


def sanitize_prefix(prefix: str) -> str:
    """Keep the prefix a single path segment."""
    prefix = prefix.replace("/", "-")
    if os.sep != "/":
        prefix = prefix.replace(os.sep, "-")
    if os.altsep and os.altsep != "/":
        prefix = prefix.replace(os.altsep, "-")
    return prefix


def log_filename(prefix: str, day: date) -> str:
    return f"{prefix}-{day.strftime('%Y-%m-%d')}.log"


class RollingFileWriter:
    """Append-only writer that switches to a new file at local midnight.

    The open handle and the next rollover instant are guarded together by a
    single lock, so the rollover check and the write are atomic per call.
    Rollover happens lazily on the first write at or after midnight; days
    without writes produce no files. The directory must already exist.

    Nothing in here may log: the writer can itself be the sink behind the
    root logger.
    """

    def __init__(self, directory: str, prefix: str,
                 time_func: Optional[Callable[[], datetime]] = None):
        self._directory = directory
        self._prefix = sanitize_prefix(prefix)
        self._time_func = time_func or local_now
        self._link_path = os.path.join(directory, CURRENT_LINK)
        self._lock = threading.Lock()
        self._file = None
        self._filepath: Optional[str] = None
        self._roll_at = next_midnight(self._time_func())

    @property
    def directory(self) -> str:
        return self._directory

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def link_path(self) -> str:
        return self._link_path

    @property
    def rollover_at(self) -> datetime:
        with self._lock:
            return self._roll_at

    @property
    def current_path(self) -> Optional[str]:
        """Path of the open file, or None when no file is open."""
        with self._lock:
            return self._filepath

    def write(self, data: bytes) -> None:
        """Write and flush *data*, rolling over first if midnight has passed.

        Raises OSError if the file cannot be opened, written or flushed.
        """
        with self._lock:
            now = self._time_func()
            if self._file is None or now >= self._roll_at:
                self._rollover(now)
            self._file.write(data)
            self._file.flush()

    def close(self) -> None:
        with self._lock:
            self._close_file()

    def _close_file(self):
        fp = self._file
        self._file = None
        self._filepath = None
        if fp is not None:
            fp.close()

    def _rollover(self, now: datetime):
        # Release the old handle before opening the new one: a failed open
        # leaves no file open and the next write retries.
        self._close_file()
        filename = log_filename(self._prefix, now.date())
        path = os.path.join(self._directory, filename)
        self._file = open(path, "ab")
        self._filepath = path
        self._roll_at = next_midnight(now)
        self._update_link(filename)

    def _update_link(self, filename: str):
        try:
            os.remove(self._link_path)
        except OSError:
            pass
        try:
            os.symlink(filename, self._link_path)
        except OSError:
            pass
