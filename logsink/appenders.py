"""Sinks that emit accepted records: console, daily rolling file, journal."""

import os
import socket
import sys
import threading
from datetime import datetime
from typing import Callable, Optional, TextIO

from logsink.formatter import encode_journal_fields, format_console_line, format_file_line
from logsink.models import Level, Record
from logsink.writer import RollingFileWriter

JOURNAL_SOCKET = "/run/systemd/journal/socket"

# syslog priorities
_JOURNAL_PRIORITY = {
    Level.ERROR: 3,
    Level.WARN: 4,
    Level.INFO: 6,
    Level.DEBUG: 7,
}


class Appender:
    """Base class: ``append`` performs the side effect or raises OSError."""

    def append(self, record: Record) -> None:
        raise NotImplementedError

    def close(self) -> None:
        pass


class ConsoleAppender(Appender):
    def __init__(self, prefix: str = "", stream: Optional[TextIO] = None,
                 color: Optional[bool] = None):
        self._prefix = prefix
        self._stream = stream
        self._color = color
        self._lock = threading.Lock()

    @property
    def prefix(self) -> str:
        return self._prefix

    def _target(self) -> TextIO:
        # Resolved per call so redirected sys.stdout is honored.
        return self._stream if self._stream is not None else sys.stdout

    def append(self, record: Record) -> None:
        stream = self._target()
        color = self._color
        if color is None:
            color = hasattr(stream, "isatty") and stream.isatty()
        line = format_console_line(record, self._prefix, color=color)
        with self._lock:
            stream.write(line + "\n")
            stream.flush()


class RollingFileAppender(Appender):
    """Renders records as text lines into a :class:`RollingFileWriter`."""

    def __init__(self, directory: str, prefix: str,
                 time_func: Optional[Callable[[], datetime]] = None):
        self._writer = RollingFileWriter(directory, prefix, time_func=time_func)

    @property
    def writer(self) -> RollingFileWriter:
        return self._writer

    def append(self, record: Record) -> None:
        self._writer.write(format_file_line(record).encode("utf-8", errors="backslashreplace"))

    def close(self) -> None:
        self._writer.close()


class JournalAppender(Appender):
    """Sends records to the systemd journal over its native datagram socket."""

    def __init__(self, identifier: str, socket_path: str = JOURNAL_SOCKET):
        self._identifier = identifier
        self._socket_path = socket_path
        self._sock = socket.socket(socket.AF_UNIX, socket.SOCK_DGRAM)

    @staticmethod
    def available(socket_path: str = JOURNAL_SOCKET) -> bool:
        return os.path.exists(socket_path)

    def fields(self, record: Record) -> dict[str, str]:
        fields = {
            "MESSAGE": record.message,
            "PRIORITY": str(_JOURNAL_PRIORITY[record.level]),
            "SYSLOG_IDENTIFIER": self._identifier,
            "TARGET": record.namespace,
        }
        if record.thread_tag:
            fields["THREAD"] = record.thread_tag
        return fields

    def append(self, record: Record) -> None:
        self._sock.sendto(encode_journal_fields(self.fields(record)), self._socket_path)

    def close(self) -> None:
        self._sock.close()
