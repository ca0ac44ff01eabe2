"""Error kinds raised by the Sprig reader and evaluator."""

from __future__ import annotations

from typing import Any


class SprigError(Exception):
    """ Base class for all Sprig errors"""
    kind = "Error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.kind}: {self.message}"


class SprigVariableNotFound(SprigError):
    """ Raised when a symbol is looked up or assigned before it is defined"""
    kind = "RuntimeError"

    def __init__(self, name: Any):
        super().__init__(f"variable {name} not found")
        self.name = str(name)


class SprigSyntaxError(SprigError):
    """ Raised when the head of a call is neither an operation nor a lambda"""
    kind = "SyntaxError"

    def __init__(self, value: Any):
        from sprig.printer import to_lisp
        super().__init__(to_lisp(value))
        self.value = value

    def __str__(self) -> str:
        return f"{self.kind} {self.message}"


class SprigArgumentError(SprigError):
    """ Raised when a special form receives a malformed argument shape"""
    kind = "ArgumentError"


class SprigValueError(SprigError):
    """ Raised when an operation receives operands of the wrong kind"""
    kind = "ValueError"


class SprigRuntimeError(SprigError):
    """ Raised for other semantic failures (car of a non-pair, no cond match, ...)"""
    kind = "RuntimeError"


class SprigReadError(SprigError):
    """ Raised by the reader on malformed source text"""
    kind = "ReadError"


class FrameUnderflowError(Exception):
    """ Raised when the root frame of an environment is popped (an interpreter bug, not a SprigError)"""
