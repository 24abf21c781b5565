"""Process configuration read from the environment (and an optional .env file)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

from infra.paths import DEFAULT_LOG_FILE

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    """
    Runtime settings for the API process.

    Attributes:
        log_level: Root logging level name
        log_json: Emit JSON log lines instead of the plain format
        log_file: Log file path, or None to log to stdout only
    """
    log_level: str = "INFO"
    log_json: bool = False
    log_file: Optional[Path] = DEFAULT_LOG_FILE


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build Settings from environment variables.

    When `environ` is omitted, a `.env` file in the working directory is
    loaded first (existing variables win) and os.environ is read.

    Variables:
        ARENA_LOG_LEVEL: default INFO
        ARENA_LOG_JSON: default false
        ARENA_LOG_FILE: default storage/logs/arena.log; empty disables the file
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    raw_file = environ.get("ARENA_LOG_FILE")
    if raw_file is None:
        log_file: Optional[Path] = DEFAULT_LOG_FILE
    elif raw_file.strip() == "":
        log_file = None
    else:
        log_file = Path(raw_file)

    return Settings(
        log_level=environ.get("ARENA_LOG_LEVEL", "INFO").upper(),
        log_json=environ.get("ARENA_LOG_JSON", "").strip().lower() in _TRUTHY,
        log_file=log_file,
    )
