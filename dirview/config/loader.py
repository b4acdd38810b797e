from __future__ import annotations

import json
from typing import Any

from result import Err, Ok, Result

from dirview.config.defaults import default_config
from dirview.config.schema import AppConfig, from_dict
from dirview.services.fs import DEFAULT_FS, FileSystem

CONFIG_PATH = "~/.config/dirview/config.json"


def _read_payload(path: str, fs: FileSystem) -> Result[dict[str, Any], str]:
    try:
        text = fs.read_text(path)
    except OSError as exc:
        return Err(f"Failed reading config at {path}: {exc}.")
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        return Err(f"Failed reading config at {path}: invalid JSON ({exc.msg}, line {exc.lineno}).")
    if not isinstance(payload, dict):
        return Err(f"Config at {path} must be a JSON object.")
    return Ok(payload)


def load_config(path: str | None = None, fs: FileSystem = DEFAULT_FS) -> Result[AppConfig, str]:
    """Load the user config, falling back to defaults when no file exists.

    Individual bad values fall back to their defaults; only an unreadable file
    or a payload that is not a JSON object is reported as an error.
    """
    resolved = fs.expanduser(path or CONFIG_PATH)
    if not fs.exists(resolved):
        return Ok(default_config())

    payload = _read_payload(resolved, fs)
    if isinstance(payload, Err):
        return Err(payload.unwrap_err())
    return Ok(from_dict(payload.unwrap(), default_config()))


def sample_config_json() -> str:
    return json.dumps(default_config().to_dict(), indent=2)
