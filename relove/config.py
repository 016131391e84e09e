"""
relove/config.py
Service config for the local API and CLI. Persists to relove_config.json.
The rule engine itself reads no configuration.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "relove_config.json"
CONFIG_DIR_ENV  = "RELOVE_CONFIG_DIR"

DEFAULT_CONFIG = {
    "host": "127.0.0.1",
    "port": 8765,
    "log_level": "INFO",
    "service_name": "relove-ai",
    "cors_origins": [
        "http://localhost",
        "http://localhost:5173",
        "http://127.0.0.1",
        "http://127.0.0.1:5173",
    ],
}

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _config_path(project_root: Optional[Path] = None) -> Path:
    root = project_root or Path.cwd()
    return root / CONFIG_FILENAME


def load_config(project_root: Optional[Path] = None) -> Dict[str, Any]:
    """Load config from relove_config.json. Returns defaults if missing."""
    path = _config_path(project_root)
    if path.exists():
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
            if not isinstance(data, dict):
                raise ValueError("top-level JSON value must be an object")
            return {**DEFAULT_CONFIG, **data}
        except (json.JSONDecodeError, OSError, ValueError) as e:
            logger.warning(f"Config load failed ({path}): {e}")
    return dict(DEFAULT_CONFIG)


def save_config(config: Dict[str, Any], project_root: Optional[Path] = None) -> Path:
    """Persist config to relove_config.json."""
    path = _config_path(project_root)
    path.write_text(json.dumps(config, indent=2), encoding="utf-8")
    return path


def ensure_config(project_root: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load config from project_root, else $RELOVE_CONFIG_DIR, else cwd.
    Unknown log levels fall back to INFO; bad ports fall back to the default.
    """
    if project_root is None and os.environ.get(CONFIG_DIR_ENV):
        project_root = Path(os.environ[CONFIG_DIR_ENV])
    config = load_config(project_root)

    level = str(config.get("log_level", "INFO")).upper()
    if level not in LOG_LEVELS:
        logger.warning(f"Unknown log_level {config.get('log_level')!r} — using INFO")
        level = "INFO"
    config["log_level"] = level

    try:
        port = int(config.get("port"))
        if not 0 < port < 65536:
            raise ValueError(port)
        config["port"] = port
    except (TypeError, ValueError):
        logger.warning(f"Invalid port {config.get('port')!r} — using {DEFAULT_CONFIG['port']}")
        config["port"] = DEFAULT_CONFIG["port"]

    return config
