"""Runtime configuration for termpress.

Layout constants are fixed. Everything else resolves, lowest to highest
precedence, from defaults, the JSON settings file at
XDG_CONFIG_HOME/termpress/settings.json, TERMPRESS_* environment variables,
and explicit overrides (CLI flags).

// [LAW:one-source-of-truth] Layout constants live here and nowhere else.

This module is a STABLE BOUNDARY.
Import as: import termpress.settings
"""

import json
import logging
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path

logger = logging.getLogger(__name__)

# ─── Layout constants ─────────────────────────────────────────────────────────

MAX_WIDTH = 80
HEADER_HEIGHT = 4
FOOTER_HEIGHT = 4
# Columns given up below MAX_WIDTH; at full width they hold the side label.
NARROW_MARGIN = 2
COLUMN_GAP = 2


# ─── Runtime config ───────────────────────────────────────────────────────────


@dataclass(frozen=True)
class RuntimeConfig:
    """Resolved runtime settings for one process."""

    store_root: str = "fs"
    site_name: str = "termpress"
    high_performance: bool = True
    code_theme: str = "monokai"
    dark: bool = True
    host: str = "localhost"
    port: int = 23234


_ENV_KEYS = {
    "store_root": "TERMPRESS_STORE_ROOT",
    "site_name": "TERMPRESS_SITE_NAME",
    "high_performance": "TERMPRESS_HIGH_PERFORMANCE",
    "code_theme": "TERMPRESS_CODE_THEME",
    "dark": "TERMPRESS_DARK",
    "host": "TERMPRESS_HOST",
    "port": "TERMPRESS_PORT",
}

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


def get_config_path() -> Path:
    """Return path to settings file.

    Uses XDG_CONFIG_HOME (default ~/.config) / termpress / settings.json.
    """
    config_home = os.environ.get("XDG_CONFIG_HOME", os.path.expanduser("~/.config"))
    return Path(config_home) / "termpress" / "settings.json"


def load_settings(path: Path | None = None) -> dict:
    """Load settings from JSON file. Returns empty dict on missing/corrupt file."""
    path = path or get_config_path()
    # [LAW:dataflow-not-control-flow] Always attempt read; empty dict is the "no data" value.
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (json.JSONDecodeError, OSError) as exc:
        logger.warning("ignoring unreadable settings file %s: %s", path, exc)
        return {}
    return data if isinstance(data, dict) else {}


def _coerce(name: str, raw, default):
    """Coerce a raw settings/env value to the type of the field default."""
    if isinstance(default, bool):
        if isinstance(raw, bool):
            return raw
        text = str(raw).strip().lower()
        if text in _TRUTHY:
            return True
        if text in _FALSY:
            return False
        raise ValueError(f"{name}: expected a boolean, got {raw!r}")
    if isinstance(default, int):
        return int(raw)
    return str(raw)


def resolve_config(
    overrides: dict | None = None,
    *,
    settings_path: Path | None = None,
    environ: dict | None = None,
) -> RuntimeConfig:
    """Build the RuntimeConfig from defaults, settings file, env and overrides.

    Override values of None are ignored so argparse defaults can pass through.
    Invalid values are logged and skipped rather than aborting startup.
    """
    environ = os.environ if environ is None else environ
    config = RuntimeConfig()
    defaults = {f.name: getattr(config, f.name) for f in fields(RuntimeConfig)}

    layers = [
        ("settings", load_settings(settings_path)),
        ("env", {key: environ[env] for key, env in _ENV_KEYS.items() if env in environ}),
        ("overrides", {k: v for k, v in (overrides or {}).items() if v is not None}),
    ]
    for source, layer in layers:
        updates = {}
        for name, raw in layer.items():
            if name not in defaults:
                continue
            try:
                updates[name] = _coerce(name, raw, defaults[name])
            except ValueError as exc:
                logger.warning("ignoring %s value: %s", source, exc)
        config = replace(config, **updates)
    return config
