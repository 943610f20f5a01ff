"""logsink demo: initialize the sinks and emit one record per level."""

import argparse
import dataclasses
import logging
import os
import sys
import threading

from logsink.bootstrap import init, set_thread_prefix, shutdown
from logsink.config import load_config, load_yaml_config

logger = logging.getLogger("logsink.demo")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="logsink",
        description="Write sample records to console, daily log files and the journal.",
    )
    parser.add_argument("--config", default=os.environ.get("LOG_CONFIG"),
                        help="Path to YAML config file")
    parser.add_argument("--log-dir", help="Directory for daily log files")
    parser.add_argument("--appname", help="Log file prefix and journal identifier")
    parser.add_argument("--debug", action="store_true", default=None,
                        help="Also emit debug records")
    parser.add_argument("--no-stdout", dest="use_stdout", action="store_false", default=None,
                        help="Do not log to the console")
    parser.add_argument("--show-appname", action="store_true", default=None,
                        help="Prefix console lines with [appname]")
    parser.add_argument("--journal", dest="use_journal", action="store_true", default=None,
                        help="Also log to the systemd journal")
    parser.add_argument("--targets",
                        help="Namespace filter rules, e.g. --targets=app,-app::noisy "
                             "(use the = form when the first rule starts with -)")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    config = load_config(load_yaml_config(args.config))
    overrides = {
        name: value for name, value in vars(args).items()
        if name != "config" and value is not None
    }
    config = dataclasses.replace(config, **overrides)

    try:
        init(config)
    except OSError as e:
        print(f"Error: cannot initialize logging in {config.log_dir}: {e}", file=sys.stderr)
        sys.exit(1)

    logger.debug("debug")
    logger.info("info")
    logger.warning("warn")
    logger.error("error")

    def worker():
        set_thread_prefix("[worker] ")
        logger.info("hello from a tagged thread")

    t = threading.Thread(target=worker)
    t.start()
    t.join()
    shutdown()


if __name__ == "__main__":
    main()
