from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

from quill.config import get_prelude_root

logger = logging.getLogger(__name__)

PRELUDE_FILE = 'core.lisp'


class _HasEvalPrelude(Protocol):
    def eval_prelude(self, code: str) -> None: ...


def prelude_path() -> Path:
    return get_prelude_root() / PRELUDE_FILE


def load_prelude(itp: _HasEvalPrelude) -> None:
    p = prelude_path()
    if not p.exists():
        raise FileNotFoundError(f"Cannot find prelude '{PRELUDE_FILE}' in {p.parent}")
    logger.debug("Loading prelude from %s", p)
    itp.eval_prelude(p.read_text(encoding='utf-8'))
