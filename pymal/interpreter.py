from __future__ import annotations

import logging
from typing import Literal, Optional

from pymal import SExpression, MalValue
from pymal.builtin.env_builtin import register
from pymal.evaluation.evaluator import evaluate
from pymal.printer import pr_str
from pymal.reader.parser import read_all, read_str
from pymal.types.environment import Environment
from pymal.types.nil import Nil

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Orchestrates reading, evaluating and printing pymal code.
    Owns the root Environment, which persists across calls.
    """

    def __init__(self, prelude: str | None | Literal['auto'] = 'auto'):
        self.env: Environment = Environment()
        register(self.env)

        if prelude is None:
            pass  # explicit: no prelude
        elif prelude == 'auto':
            try:
                # Lazy import keeps config lookups out of module import time
                from pymal.modules.prelude_loader import load_prelude
                load_prelude(self)
            except FileNotFoundError:
                logger.warning("no prelude found, starting without one")
        elif prelude:
            self.eval_prelude(prelude)

    def eval_prelude(self, code: str) -> None:
        for expr in read_all(code):
            evaluate(expr, self.env)

    def read(self, text: str) -> Optional[SExpression]:
        """First form in `text`, or None if it holds no tokens."""
        return read_str(text)

    def evaluate(self, form: SExpression) -> MalValue:
        return evaluate(form, self.env)

    def print(self, value: MalValue, readably: bool = True) -> str:
        return pr_str(value, readably)

    def eval(self, code: str) -> MalValue:
        """Evaluate every form in `code` and return the last value (nil if none)."""
        result: MalValue = Nil
        for expr in read_all(code):
            result = evaluate(expr, self.env)
        return result

    def rep(self, line: str) -> Optional[str]:
        """One read/eval/print cycle; None when the line holds no form.

        Errors propagate to the caller. Bindings made by `def!` before the
        error are kept; inner scopes never leak into the root environment.
        """
        form = self.read(line)
        if form is None:
            return None
        logger.debug("eval %s", pr_str(form))
        result = self.evaluate(form)
        logger.debug("result %s", pr_str(result))
        return self.print(result)
