"""Public entrypoint: wire appenders together and hook into stdlib logging."""

import logging
import os
from datetime import datetime
from typing import Callable, Optional

from logsink.appenders import ConsoleAppender, JournalAppender, RollingFileAppender
from logsink.config import Config
from logsink.dispatch import DispatchHandler, Dispatcher
from logsink.filters import TargetFilter
from logsink.models import Level
from logsink.thread_tag import set_thread_tag

logger = logging.getLogger(__name__)

_installed: Optional[DispatchHandler] = None


def ensure_dir(path: str) -> None:
    if os.path.isdir(path):
        return
    os.makedirs(path, exist_ok=True)


def set_thread_prefix(prefix: str) -> None:
    """Set the prefix prepended to every message logged from this thread."""
    set_thread_tag(prefix)


def build_dispatcher(config: Config,
                     time_func: Optional[Callable[[], datetime]] = None) -> Dispatcher:
    """Create the appenders described by *config*. The log dir must exist."""
    target_filter = TargetFilter.from_config(config.targets) if config.targets.strip() else None
    dispatcher = Dispatcher(min_level=Level.DEBUG if config.debug else Level.INFO)

    dispatcher.add_appender(
        RollingFileAppender(config.log_dir, config.appname, time_func=time_func),
        target_filter,
    )
    if config.use_stdout:
        prefix = f"[{config.appname}] " if config.show_appname else ""
        dispatcher.add_appender(ConsoleAppender(prefix), target_filter)
    if config.use_journal:
        if JournalAppender.available():
            dispatcher.add_appender(JournalAppender(config.appname), target_filter)
        else:
            logger.warning("Journal socket not found, journal logging disabled")
    return dispatcher


def init(config: Config, time_func: Optional[Callable[[], datetime]] = None) -> Dispatcher:
    """Initialize logging sinks and route the root logger through them.

    Files go to ``<log_dir>/<appname>-YYYY-MM-DD.log``, rolled over at local
    midnight; ``<log_dir>/current`` links to the latest file. Calling this
    again replaces the sinks installed by the previous call.

    Raises OSError if the log directory cannot be created.
    """
    global _installed
    ensure_dir(config.log_dir)
    dispatcher = build_dispatcher(config, time_func=time_func)
    handler = DispatchHandler(dispatcher)

    root = logging.getLogger()
    if _installed is not None:
        root.removeHandler(_installed)
        _installed.close()
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if config.debug else logging.INFO)
    _installed = handler

    logger.debug("Logging to %s (appenders: %s)", config.log_dir,
                 ", ".join(type(a).__name__ for a in dispatcher.appenders))
    return dispatcher


def shutdown() -> None:
    """Detach and close the sinks installed by :func:`init`."""
    global _installed
    if _installed is None:
        return
    logging.getLogger().removeHandler(_installed)
    _installed.close()
    _installed = None
