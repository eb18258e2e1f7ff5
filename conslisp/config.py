from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Optional

# Defaults
_DEFAULT_LOG_LEVEL = "WARNING"
_DEFAULT_PROMPT = "conslisp> "
_DEFAULT_HISTORY = Path.home() / ".conslisp_history"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def value_from_env(var: str, default: str) -> str:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def get_log_level() -> int:
    name = value_from_env("CONSLISP_LOG_LEVEL", _DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(name)
    # getLevelName returns a string for unknown names
    return level if isinstance(level, int) else logging.WARNING


def get_prompt() -> str:
    return os.environ.get("CONSLISP_PROMPT") or _DEFAULT_PROMPT


def get_history_path() -> Optional[Path]:
    raw = value_from_env("CONSLISP_HISTORY", str(_DEFAULT_HISTORY))
    # "-" disables history persistence
    return None if raw == "-" else Path(raw).expanduser()


def configure_logging(level: Optional[int] = None) -> None:
    logging.basicConfig(
        level=get_log_level() if level is None else level,
        format=LOG_FORMAT,
    )
