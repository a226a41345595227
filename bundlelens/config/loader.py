from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from loguru import logger
from result import Err, Ok, Result

from bundlelens.config.defaults import default_config
from bundlelens.config.schema import AppConfig

DEFAULT_CONFIG_FILE = Path("~/.config/bundlelens/config.json")


def _read_object(config_file: Path) -> dict[str, Any]:
    payload = json.loads(config_file.read_text(encoding="utf-8"))
    if not isinstance(payload, dict):
        raise TypeError(f"top-level value is a {type(payload).__name__}, expected a JSON object")
    return payload


def load_config(path: str | Path | None = None) -> Result[AppConfig, str]:
    """Load the user config, overlaying it on the built-in defaults.

    An absent file is not an error: the defaults are returned as is.
    """
    config_file = Path(path).expanduser() if path else DEFAULT_CONFIG_FILE.expanduser()
    if not config_file.exists():
        return Ok(default_config())

    try:
        config = AppConfig.from_dict(_read_object(config_file), default_config())
    except (OSError, ValueError, TypeError, KeyError, AttributeError) as exc:
        return Err(f"Invalid config {config_file}: {exc}")

    logger.debug("Loaded config from {}", config_file)
    return Ok(config)


def sample_config_json() -> str:
    """Render the defaults as an editable config file body."""
    return json.dumps(default_config().to_dict(), indent=2)
