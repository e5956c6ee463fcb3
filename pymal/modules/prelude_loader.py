from __future__ import annotations
import logging
from pathlib import Path
from typing import Protocol

from pymal.config import get_prelude_root

logger = logging.getLogger(__name__)


class _HasEvalPrelude(Protocol):
    def eval_prelude(self, code: str) -> None: ...


PRELUDE_FILES = ('core.mal',)


def prelude_paths(root: Path | None = None) -> list[Path]:
    root = root if root is not None else get_prelude_root()
    return [root / name for name in PRELUDE_FILES]


def load_prelude(itp: _HasEvalPrelude) -> None:
    """Evaluate the prelude files found under the configured prelude root.

    Raises FileNotFoundError when none of them exists.
    """
    found = [p for p in prelude_paths() if p.is_file()]
    if not found:
        raise FileNotFoundError(f"No prelude found under {get_prelude_root()}")
    for path in found:
        logger.debug("loading prelude %s", path)
        itp.eval_prelude(path.read_text(encoding='utf-8'))
