"""Reserved-word operations.

The reader turns any symbol whose text matches a member's value into that
member; nothing else ever produces an Operation.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class Operation(Enum):
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    POW = "pow"
    EXP = "exp"
    CAR = "car"
    CDR = "cdr"
    CONS = "cons"
    LIST = "list"
    BEGIN = "begin"
    MODULE = "module"
    COND = "cond"
    IF = "if"
    EQ = "="
    LT = "<"
    GT = ">"
    LE = "<="
    GE = ">="
    DEFINE = "define"
    SET = "set!"
    LAMBDA = "lambda"
    QUOTE = "quote"
    LET = "let"

    @classmethod
    def lookup(cls, name: str) -> Optional[Operation]:
        return RESERVED_WORDS.get(name)

    def __str__(self) -> str:
        return self.value


RESERVED_WORDS: dict[str, Operation] = {op.value: op for op in Operation}
