from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Iterable, List


def _sep() -> str:
    return ';' if os.name == 'nt' else ':'


# Resolve installation dir (pymal package directory)
_PYMAL_DIR = Path(__file__).resolve().parent

# Defaults
_DEFAULT_PRELUDE_DIR = _PYMAL_DIR / 'prelude'
_DEFAULT_PROMPT = 'user> '
_DEFAULT_LOG_LEVEL = 'WARNING'


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    sep = _sep()
    return [Path(p.strip()) for p in raw.split(sep) if p.strip()]


def get_prelude_root() -> Path:
    roots = paths_from_env('PYMAL_PRELUDE_PATH', [_DEFAULT_PRELUDE_DIR])
    # treat as single directory; if a file path is set, return its parent
    p = roots[0]
    return p if p.is_dir() else p.parent


def get_prompt() -> str:
    return os.environ.get('PYMAL_PROMPT', _DEFAULT_PROMPT)


def get_log_level() -> int:
    """Numeric logging level from PYMAL_LOG_LEVEL (name or number)."""
    raw = os.environ.get('PYMAL_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip()
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    # getLevelName returns "Level X" for unknown names
    return level if isinstance(level, int) else logging.WARNING
