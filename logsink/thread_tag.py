"""Per-thread message prefix, prepended by appenders to every record."""

import threading

_local = threading.local()


def get_thread_tag() -> str:
    return getattr(_local, "tag", "")


def set_thread_tag(tag: str) -> None:
    _local.tag = tag


def clear_thread_tag() -> None:
    _local.tag = ""
