from __future__ import annotations

import logging
from pathlib import Path

from sprig import LispValue
from sprig.config import get_prelude_path
from sprig.evaluation.evaluator import evaluate
from sprig.reader.parser import lex, TokenStream
from sprig.types.environment import Environment
from sprig.types.nil import Nil

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Reads and evaluates Sprig code against one persistent Environment, so
    definitions made by one call are visible to the next.
    """

    def __init__(self, prelude: str | Path | None = None):
        self.env: Environment = Environment()

        if prelude is None:
            prelude = get_prelude_path()
        if prelude is not None:
            self.load(prelude)

    def eval(self, code: str) -> LispValue:
        """Evaluate every top-level form in `code`; return the last value (Nil if none)."""
        stream = TokenStream(lex(code))
        result: LispValue = Nil
        while (expr := stream.parse_expr()) is not None:
            result = evaluate(expr, self.env)
        return result

    def load(self, path: str | Path) -> LispValue:
        """Evaluate a source file, e.g. a startup prelude."""
        path = Path(path)
        logger.info("Loading %s", path)
        return self.eval(path.read_text(encoding="utf-8"))
