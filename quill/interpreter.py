from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Literal

from quill import LispValue, SExpression
from quill.config import get_recursion_limit
from quill.errors import QuillRecursionError
from quill.reader.parser import read_all
from quill.types.nil import Nil
from quill.types.environment import Environment
from quill.builtin.env_builtin import register
from quill.debug_utils.printer import pr_str
from quill.evaluation.evaluator import evaluate

logger = logging.getLogger(__name__)


def _ensure_recursion_limit(limit: int) -> None:
    if sys.getrecursionlimit() < limit:
        logger.debug("Raising recursion limit to %d", limit)
        sys.setrecursionlimit(limit)


class Interpreter:
    """
    Reads and evaluates Quill code against a single global Environment.

    The global frame is populated with the host primitives, then the prelude
    (`empty?`, `not`, `load-file`, `defun!`, `when`) is evaluated into it.
    A failing form aborts only itself: definitions completed by earlier forms
    stay in place. Evaluation that nests past the interpreter stack raises
    QuillRecursionError naming the top-level form.
    """

    def __init__(self, prelude: str | None | Literal['auto'] = 'auto'):
        _ensure_recursion_limit(get_recursion_limit())
        self.env: Environment = Environment()
        register(self.env)

        if prelude is None:
            pass  # explicit: no prelude
        elif prelude == 'auto':
            # Lazy import to keep the loader optional for embedders
            from quill.modules.prelude_loader import load_prelude
            load_prelude(self)
        elif prelude:
            self.eval_prelude(prelude)

    def _evaluate(self, expr: SExpression) -> LispValue:
        try:
            return evaluate(expr, self.env)
        except RecursionError as e:
            raise QuillRecursionError(
                f"Maximum recursion depth exceeded while evaluating {pr_str(expr)}", expr
            ) from e

    def eval_prelude(self, code: str) -> None:
        for expr in read_all(code):
            self._evaluate(expr)

    def eval(self, code: str) -> LispValue:
        """Evaluate every form in `code`; return the value of the last one (nil if none)."""
        result: LispValue = Nil
        for expr in read_all(code):
            result = self._evaluate(expr)
        return result

    def eval_file(self, path: str | Path) -> LispValue:
        logger.debug("Evaluating file %s", path)
        return self.eval(Path(path).read_text(encoding='utf-8'))
