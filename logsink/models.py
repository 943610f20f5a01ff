"""Log record model shared by the filter, the appenders and the dispatcher."""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum


class Level(IntEnum):
    """Record severity. Ordered so that ERROR > WARN > INFO > DEBUG."""

    DEBUG = 10
    INFO = 20
    WARN = 30
    ERROR = 40

    @property
    def label(self) -> str:
        return self.name

    @classmethod
    def from_logging(cls, levelno: int) -> "Level":
        """Map a stdlib ``logging`` level number onto the four record levels."""
        if levelno >= logging.ERROR:
            return cls.ERROR
        if levelno >= logging.WARNING:
            return cls.WARN
        if levelno >= logging.INFO:
            return cls.INFO
        return cls.DEBUG


@dataclass(frozen=True)
class Record:
    level: Level
    namespace: str        # e.g. "app::db::pool"
    message: str          # already rendered
    thread_tag: str = ""
    created: datetime = field(default_factory=datetime.now)
