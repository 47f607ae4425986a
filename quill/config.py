from __future__ import annotations
import os
from pathlib import Path
from typing import Iterable, List


def _sep() -> str:
    return ';' if os.name == 'nt' else ':'


# Resolve installation dir (quill package directory)
_QUILL_DIR = Path(__file__).resolve().parent

# Defaults
_DEFAULT_PRELUDE_DIR = _QUILL_DIR / 'prelude'
_DEFAULT_LOAD_DIRS: list[Path] = []


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    sep = _sep()
    return [Path(p.strip()) for p in raw.split(sep) if p.strip()]


def get_prelude_root() -> Path:
    roots = paths_from_env('QUILL_PRELUDE_PATH', [_DEFAULT_PRELUDE_DIR])
    # treat as single directory; if a file path is set, return its parent
    p = roots[0]
    return p if p.is_dir() else p.parent


def get_load_roots() -> List[Path]:
    return paths_from_env('QUILL_LOAD_PATH', _DEFAULT_LOAD_DIRS)


_DEFAULT_RECURSION_LIMIT = 10000


def get_recursion_limit() -> int:
    # each Lisp call costs several Python frames
    raw = os.environ.get('QUILL_RECURSION_LIMIT')
    return int(raw) if raw and raw.strip() else _DEFAULT_RECURSION_LIMIT
