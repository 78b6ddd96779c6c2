"""Project configuration loading for simplejwt.

This module is intentionally small and deterministic: it only reads
`simplejwt.toml` and performs light validation.
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from simplejwt.errors import SimpleJWTConfigError
from simplejwt.signer import ALGORITHMS, DEFAULT_ALGORITHM

CONFIG_FILENAME = "simplejwt.toml"


@dataclass(frozen=True)
class TokenConfig:
    type: str
    algorithm: str


@dataclass(frozen=True)
class ValidationConfig:
    leeway: int
    enforce_not_before: bool


@dataclass(frozen=True)
class SimpleJWTConfig:
    version: int
    token: TokenConfig
    validation: ValidationConfig


def default_config() -> SimpleJWTConfig:
    return SimpleJWTConfig(
        version=1,
        token=TokenConfig(type="JWT", algorithm=DEFAULT_ALGORITHM),
        validation=ValidationConfig(leeway=0, enforce_not_before=False),
    )


def find_project_root(start: Path) -> Path:
    """Walk upward from `start` (file or directory) looking for `simplejwt.toml`."""

    cur = start
    try:
        if cur.is_file():
            cur = cur.parent
    except OSError:
        # Unreadable start (e.g. a dangling symlink): begin from its parent.
        cur = cur.parent

    cur = cur.resolve()
    while True:
        if (cur / CONFIG_FILENAME).is_file():
            return cur
        if cur.parent == cur:
            break
        cur = cur.parent

    raise SimpleJWTConfigError(
        f"Could not find {CONFIG_FILENAME} by walking upward from start path."
    )


def _as_table(value: Any, *, name: str) -> dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise SimpleJWTConfigError(f"Expected [{name}] to be a table.")
    return value


def _as_bool(value: Any, *, name: str) -> bool:
    if not isinstance(value, bool):
        raise SimpleJWTConfigError(f"Expected {name} to be a boolean.")
    return value


def _as_int(value: Any, *, name: str) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise SimpleJWTConfigError(f"Expected {name} to be an integer.")
    return value


def _as_str(value: Any, *, name: str) -> str:
    if not isinstance(value, str):
        raise SimpleJWTConfigError(f"Expected {name} to be a string.")
    return value


def load_config(*, root: Path | None = None, config_path: Path | None = None) -> SimpleJWTConfig:
    """Load and validate `simplejwt.toml`.

    If neither `root` nor `config_path` are provided, the project root is
    discovered by walking upward from the current working directory.
    """

    if config_path is None:
        if root is None:
            root = find_project_root(Path.cwd())
        config_path = root / CONFIG_FILENAME

    try:
        raw = config_path.read_bytes()
    except FileNotFoundError as e:
        raise SimpleJWTConfigError(f"Missing {CONFIG_FILENAME} at: {config_path}") from e
    except OSError as e:
        raise SimpleJWTConfigError(f"Failed reading config file: {config_path}") from e

    try:
        data = tomllib.loads(raw.decode("utf-8"))
    except UnicodeDecodeError as e:
        raise SimpleJWTConfigError(f"Config is not valid UTF-8: {config_path}") from e
    except tomllib.TOMLDecodeError as e:
        raise SimpleJWTConfigError(f"Invalid TOML in {config_path}: {e}") from e

    version = data.get("version", None)
    if version is None:
        raise SimpleJWTConfigError(f"Missing required `version = 1` in {CONFIG_FILENAME}.")
    version_i = _as_int(version, name="version")
    if version_i != 1:
        raise SimpleJWTConfigError(f"Unsupported config version: {version_i} (expected 1).")

    defaults = default_config()
    token_tbl = _as_table(data.get("token"), name="token")
    validation_tbl = _as_table(data.get("validation"), name="validation")

    if "type" in token_tbl:
        token_type = _as_str(token_tbl["type"], name="token.type")
    else:
        token_type = defaults.token.type

    if "algorithm" in token_tbl:
        algorithm = _as_str(token_tbl["algorithm"], name="token.algorithm")
    else:
        algorithm = defaults.token.algorithm

    if "leeway" in validation_tbl:
        leeway = _as_int(validation_tbl["leeway"], name="validation.leeway")
    else:
        leeway = defaults.validation.leeway

    if "enforce_not_before" in validation_tbl:
        enforce_not_before = _as_bool(
            validation_tbl["enforce_not_before"], name="validation.enforce_not_before"
        )
    else:
        enforce_not_before = defaults.validation.enforce_not_before

    # Validation
    if not token_type:
        raise SimpleJWTConfigError("Invalid config: token.type must be non-empty.")

    if algorithm not in ALGORITHMS:
        raise SimpleJWTConfigError(
            f"Invalid config: token.algorithm must be one of {sorted(ALGORITHMS)}."
        )

    if leeway < 0:
        raise SimpleJWTConfigError("Invalid config: validation.leeway must be >= 0.")

    return SimpleJWTConfig(
        version=version_i,
        token=TokenConfig(type=token_type, algorithm=algorithm),
        validation=ValidationConfig(leeway=leeway, enforce_not_before=enforce_not_before),
    )
