"""Fan-out of records to appenders, and the bridge from stdlib ``logging``."""

import logging
import threading
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from logsink.appenders import Appender
from logsink.filters import DELIMITER, TargetFilter
from logsink.models import Level, Record
from logsink.thread_tag import get_thread_tag


class DispatchError(Exception):
    """Raised when one or more appenders failed to emit a record."""

    def __init__(self, failures: list[tuple[Appender, Exception]]):
        self.failures = failures
        details = "; ".join(f"{type(a).__name__}: {e}" for a, e in failures)
        super().__init__(f"{len(failures)} appender(s) failed: {details}")


@dataclass(frozen=True)
class Route:
    appender: Appender
    target_filter: Optional[TargetFilter] = None

    def accepts(self, record: Record) -> bool:
        if self.target_filter is None:
            return True
        return self.target_filter.allows(record.namespace)


class Dispatcher:
    """Routes each record to every appender whose filter does not reject it."""

    def __init__(self, min_level: Level = Level.INFO):
        self.min_level = min_level
        self._routes: list[Route] = []
        self._lock = threading.Lock()

    @property
    def appenders(self) -> list[Appender]:
        with self._lock:
            return [r.appender for r in self._routes]

    def add_appender(self, appender: Appender,
                     target_filter: Optional[TargetFilter] = None) -> None:
        with self._lock:
            self._routes.append(Route(appender, target_filter))

    def dispatch(self, record: Record) -> None:
        """Emit *record* through all accepting appenders.

        Every appender is tried even if an earlier one fails; failures are
        raised together afterwards as :class:`DispatchError`.
        """
        if record.level < self.min_level:
            return
        with self._lock:
            routes = list(self._routes)
        failures = []
        for route in routes:
            if not route.accepts(record):
                continue
            try:
                route.appender.append(record)
            except Exception as e:
                failures.append((route.appender, e))
        if failures:
            raise DispatchError(failures)

    def log(self, level: Level, namespace: str, message: str) -> None:
        self.dispatch(Record(level, namespace, message, thread_tag=get_thread_tag()))

    def close(self) -> None:
        with self._lock:
            routes = self._routes
            self._routes = []
        for route in routes:
            route.appender.close()


def namespace_from_logger_name(name: str) -> str:
    """``"app.db.pool"`` -> ``"app::db::pool"``."""
    return name.replace(".", DELIMITER)


class DispatchHandler(logging.Handler):
    """``logging.Handler`` that feeds stdlib log records into a Dispatcher."""

    def __init__(self, dispatcher: Dispatcher, level: int = logging.NOTSET):
        super().__init__(level)
        self.dispatcher = dispatcher

    def to_record(self, record: logging.LogRecord) -> Record:
        return Record(
            level=Level.from_logging(record.levelno),
            namespace=namespace_from_logger_name(record.name),
            message=self.format(record),
            thread_tag=get_thread_tag(),
            created=datetime.fromtimestamp(record.created),
        )

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self.dispatcher.dispatch(self.to_record(record))
        except Exception:
            self.handleError(record)

    def close(self) -> None:
        self.dispatcher.close()
        super().close()
