"""Configuration: frozen dataclass built from defaults, a YAML file and env vars."""

import logging
import os
from dataclasses import dataclass, fields
from typing import Optional

import yaml

logger = logging.getLogger(__name__)

_ENV_VARS = {
    "log_dir": "LOG_DIR",
    "appname": "LOG_APPNAME",
    "debug": "LOG_DEBUG",
    "use_stdout": "LOG_STDOUT",
    "show_appname": "LOG_SHOW_APPNAME",
    "use_journal": "LOG_JOURNAL",
    "targets": "LOG_TARGETS",
}


def _parse_bool(value) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("true", "1", "yes")


@dataclass(frozen=True)
class Config:
    log_dir: str = "./log"
    appname: str = "app"
    debug: bool = False
    use_stdout: bool = True
    show_appname: bool = False
    use_journal: bool = False
    targets: str = ""  # TargetFilter rules, e.g. "app,-app::noisy"


def load_yaml_config(path: Optional[str]) -> dict:
    """Load a YAML mapping of Config fields. Returns empty dict if no path."""
    if not path:
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        logger.warning("Config file %s not found, using defaults", path)
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping")
    logger.info("Loaded YAML config from %s", path)
    return data


def load_config(yaml_data: Optional[dict] = None) -> Config:
    """Build Config: defaults, overridden by YAML keys, overridden by env vars."""
    values = {}
    known = {f.name: f for f in fields(Config)}
    for key, value in (yaml_data or {}).items():
        if key not in known:
            logger.warning("Ignoring unknown config key %r", key)
            continue
        values[key] = value
    for key, env_var in _ENV_VARS.items():
        raw = os.environ.get(env_var)
        if raw is not None:
            values[key] = raw

    for key, value in values.items():
        if known[key].type in (bool, "bool"):
            values[key] = _parse_bool(value)
        elif value is None:
            values[key] = ""
        elif isinstance(value, list):
            # YAML may list target rules instead of a comma-separated string
            values[key] = ",".join(str(v) for v in value)
        else:
            values[key] = str(value)
    return Config(**values)
