"""Interactive read-eval-print loop."""

from __future__ import annotations

import logging
from typing import Callable, TextIO

from sprig.errors import SprigError
from sprig.interpreter import Interpreter
from sprig.printer import to_lisp

logger = logging.getLogger(__name__)

PROMPT = "repl> "
EXIT_COMMAND = "exit"


def eval_line(interp: Interpreter, line: str) -> str:
    """Evaluate one line and return the text the REPL shows for it."""
    try:
        return f"out: {to_lisp(interp.eval(line))}"
    except SprigError as e:
        logger.debug("Evaluation failed: %s", e)
        return str(e)
    except RecursionError:
        logger.debug("Evaluation exceeded the recursion limit")
        return "RuntimeError: maximum recursion depth exceeded"


def repl(
    interp: Interpreter,
    read_line: Callable[[str], str] = input,
    out: TextIO | None = None,
) -> None:
    """Run the loop until `exit` or end of input; errors never end the session."""
    while True:
        try:
            line = read_line(PROMPT)
        except EOFError:
            break
        line = line.strip()
        if line == EXIT_COMMAND:
            break
        if not line:
            continue
        print(eval_line(interp, line), file=out)
