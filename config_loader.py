"""Helpers for resolving the optional configuration file."""

import json
import os
from typing import Any, Dict, Optional

from htmlpages.models import DEFAULT_OUTPUT_DIR

DEFAULT_CONFIG_NAME = "convert_txt_to_html.json"
CONFIG_ENV_VAR = "CONVERT_TXT_TO_HTML_CONFIG"


class ConfigError(Exception):
    """Raised when runtime configuration cannot be loaded."""


def _resolve_config_path(path: Optional[str]) -> Optional[str]:
    """Return the absolute config path, or None when no config is in use.

    Explicit paths (argument or environment variable) must exist; the
    default file name is optional.
    """
    explicit = path or os.environ.get(CONFIG_ENV_VAR)
    if not explicit:
        default = os.path.abspath(DEFAULT_CONFIG_NAME)
        return default if os.path.isfile(default) else None

    expanded = os.path.abspath(os.path.expanduser(explicit))
    if os.path.isfile(expanded):
        return expanded
    raise ConfigError(f"Configuration file not found: {explicit}")


def _resolve_path(value: str, base_dir: str) -> str:
    """Resolve ``value`` into an absolute path relative to ``base_dir``."""
    expanded = os.path.expanduser(value)
    if os.path.isabs(expanded):
        return expanded
    return os.path.abspath(os.path.join(base_dir, expanded))


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """Load the JSON config file and normalize any filesystem paths."""
    config_path = _resolve_config_path(path)
    if config_path is None:
        return {}

    try:
        with open(config_path, "r", encoding="utf-8") as config_file:
            data = json.load(config_file)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in {config_path}: {exc}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Unable to read {config_path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a JSON object in {config_path}")

    base_dir = os.path.dirname(config_path)
    resolved: Dict[str, Any] = {}
    for key, value in data.items():
        if isinstance(value, str) and key.endswith(("_dir", "_path")):
            resolved[key] = _resolve_path(value, base_dir)
        else:
            resolved[key] = value

    return resolved


def resolve_runtime_settings(
    *,
    config_path: Optional[str] = None,
) -> Dict[str, Any]:
    """Combine the config file with built-in defaults."""
    config = load_config(config_path)

    output_dir = config.get("output_dir", DEFAULT_OUTPUT_DIR)
    escape_html = config.get("escape_html", False)

    if not isinstance(output_dir, str) or not output_dir:
        raise ConfigError("output_dir must be a non-empty string.")
    if not isinstance(escape_html, bool):
        raise ConfigError("escape_html must be true or false.")

    return {
        "output_dir": output_dir,
        "escape_html": escape_html,
    }
