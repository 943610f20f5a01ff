"""Renderers for file lines, ANSI console lines and journal datagrams."""

import struct

from logsink.models import Level, Record

# ANSI color codes
WHITE = "\033[37m"
PURPLE = "\033[35m"
BOLD_RED = "\033[1;31m"
RESET = "\033[0m"

_CONSOLE_STYLE = {
    Level.ERROR: (BOLD_RED, "ERROR: "),
    Level.WARN: (PURPLE, "WARNING: "),
    Level.INFO: ("", ""),
    Level.DEBUG: (WHITE, ""),
}


def _paint(color: str, text: str) -> str:
    if not color:
        return text
    return f"{color}{text}{RESET}"


def format_file_line(record: Record) -> str:
    """Return ``HH:MM:SS,mmm : LEVEL : <tag><message>`` with a trailing newline."""
    ts = record.created.strftime("%H:%M:%S,") + f"{record.created.microsecond // 1000:03d}"
    return f"{ts} : {record.level.label:<5} : {record.thread_tag}{record.message}\n"


def format_console_line(record: Record, prefix: str = "", color: bool = True) -> str:
    """Return ``[HH:MM:SS] <prefix><tag><LABEL><message>`` without a newline."""
    ts = record.created.strftime("[%H:%M:%S]")
    style, label = _CONSOLE_STYLE[record.level]
    msg = f"{prefix}{record.thread_tag}{label}{record.message}"
    if not color:
        return f"{ts} {msg}"
    return f"{_paint(WHITE, ts)} {_paint(style, msg)}"


def encode_journal_fields(fields: dict[str, str]) -> bytes:
    """Encode fields using the systemd journal native protocol.

    Single-line values are sent as ``KEY=value``; values containing a newline
    use the binary form ``KEY\\n<u64 little-endian length><value>\\n``.
    """
    out = bytearray()
    for key, value in fields.items():
        data = value.encode("utf-8", errors="backslashreplace")
        if b"\n" in data:
            out += key.encode("ascii") + b"\n"
            out += struct.pack("<Q", len(data))
            out += data + b"\n"
        else:
            out += key.encode("ascii") + b"=" + data + b"\n"
    return bytes(out)
