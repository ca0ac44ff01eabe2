"""Lambda function representation for Sprig."""

from __future__ import annotations

from sprig import SExpression
from sprig.types.environment import Environment
from sprig.types.symbol import Symbol


class Lambda:
    """A first-class closure: formal parameters, body, and captured env."""

    __slots__ = ("formals", "body", "env")

    def __init__(self, formals: list[Symbol], body: SExpression, env: Environment):
        self.formals: list[Symbol] = formals
        self.body: SExpression = body
        # Shared, not copied: set! through this env is visible to the defining scope
        self.env: Environment = env

    # Closures compare by identity
    __eq__ = object.__eq__
    __hash__ = object.__hash__

    def __str__(self) -> str:
        from sprig.printer import to_lisp
        return to_lisp(self)

    def __repr__(self) -> str:
        """Return the Lisp-style representation of the lambda."""
        return str(self)
