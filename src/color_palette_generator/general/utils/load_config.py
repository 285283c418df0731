# src/color_palette_generator/general/utils/load_config.py

"""Load JSON data files (scheme tables) from a <data/> directory.

The top level of every file must be a JSON object; an optional validator
reshapes or rejects it. Used by the scheme table loaders.
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Callable
from pathlib import Path
from typing import Any

# --- optional json5 support (comments / trailing commas) ---------------------
try:
    import json5 as _json5
except ImportError:  # pragma: no cover - only hit when the json5 extra is missing
    _json5 = None  # type: ignore[assignment]

# ── Public surface ────────────────────────────────────────────────────────────
__all__ = [
    "DATA_DIR_ENV_VARS",
    "load_config",
    "resolve_data_dir",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]

DATA_DIR_ENV_VARS: tuple[str, ...] = ("DATA_DIR", "COLOR_PALETTE_DATA_DIR")

log = logging.getLogger(__name__)


# ── Exceptions ───────────────────────────────────────────────────────────────
class DataDirNotFound(FileNotFoundError):
    """Raise when no 'data' directory is found while walking upwards."""


class ConfigFileNotFound(FileNotFoundError):
    """Raise when the requested data file cannot be read or resolved."""


class ConfigParseError(ValueError):
    """Raise when JSON parsing/validation fails for a data file."""


class ConfigTypeError(TypeError):
    """Raise when the parsed JSON is not an object."""


# ── Data directory ───────────────────────────────────────────────────────────
def _candidate_data_dirs(start: Path | None = None) -> list[Path]:
    """Candidate 'data'/'Data' directories walking up from start."""
    start = (start or Path(__file__)).resolve()
    return [(p / name).resolve() for p in (start, *start.parents) for name in ("data", "Data")]


def _env_data_dir() -> Path | None:
    for var in DATA_DIR_ENV_VARS:
        value = os.environ.get(var)
        if value:
            return Path(os.path.expanduser(value)).resolve()
    return None


def resolve_data_dir(base_dir: Path | None = None) -> Path:
    """
    Does: Pick the data directory: explicit base_dir > env override > discovery.
    Returns: Resolved Path; raises DataDirNotFound when discovery finds nothing.
    """
    if base_dir is not None:
        return Path(base_dir).resolve()
    env_dir = _env_data_dir()
    if env_dir is not None:
        return env_dir
    candidates = _candidate_data_dirs()
    for cand in candidates:
        if cand.is_dir():
            return cand
    raise DataDirNotFound(
        "No 'data' directory found.\nTried:\n  " + "\n  ".join(str(p) for p in candidates)
    )


# ── Loading ──────────────────────────────────────────────────────────────────
def load_config(
    file: str | os.PathLike[str],
    *,
    base_dir: Path | None = None,
    encoding: str = "utf-8",
    validator: Callable[[dict[str, Any]], dict[str, Any]] | None = None,
    allow_comments: bool = False,
) -> dict[str, Any]:
    """
    Does: Read <data>/<file>.json, check it is a JSON object and run
          `validator` on it. Validator ValueError/TypeError become
          ConfigParseError.
    Returns: dict[str, Any].
    """
    data_dir = resolve_data_dir(base_dir)

    file_str = os.fspath(file)
    file_name = file_str if file_str.endswith(".json") else f"{file_str}.json"
    path = (data_dir / file_name).resolve()
    try:
        path.relative_to(data_dir)
    except ValueError as e:
        raise ConfigFileNotFound(
            f"Refusing to access file outside data dir: {path} (base={data_dir})"
        ) from e

    if not path.is_file():
        raise ConfigFileNotFound(f"Config file not found: {path}")

    try:
        with path.open("r", encoding=encoding, errors="strict", newline="") as f:
            if allow_comments:
                if _json5 is None:
                    raise ConfigParseError(
                        "json5 requested (allow_comments=True) but not installed"
                    )
                data = _json5.load(f)
            else:
                data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigParseError(f"Invalid JSON in {path}: {e}") from e
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot read {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigTypeError(f"{path.name}: expected a JSON object, got {type(data).__name__}")

    if validator is not None:
        try:
            data = validator(data)
        except (ValueError, TypeError) as e:
            raise ConfigParseError(f"{path.name}: validator failed: {e}") from e

    log.debug("Config loaded: %s (%d keys)", path.name, len(data))
    return data
