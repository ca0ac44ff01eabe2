"""Runtime environment for Sprig.

A Frame stores bindings of Symbols to evaluated Lisp values plus an `outer`
link to its enclosing frame. An Environment is a handle onto one frame of
such a chain: it observes the path from its current frame to the root and
can push and pop frames on that path.

Frames are shared by reference. A closure captures a child of the frame that
was current when the lambda was evaluated, so several handles (the defining
scope, sibling closures, in-flight calls) can see and mutate the same frame.
"""

from __future__ import annotations

from contextlib import contextmanager
from io import StringIO
from typing import Iterator, Optional

from sprig import LispValue
from sprig.errors import FrameUnderflowError, SprigVariableNotFound
from sprig.types.symbol import Symbol


class Frame:
    """One scope's binding table plus a link to its enclosing scope."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Frame] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Frame | None = outer

    def find(self, symbol: Symbol) -> Optional[Frame]:
        """Find the nearest frame in the chain that contains `symbol`."""
        frame: Optional[Frame] = self
        while frame is not None:
            if symbol in frame.vars:
                return frame
            frame = frame.outer
        return None

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        first = True
        for k, v in self.vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v!r}")
            first = False
        buffer.write("}")


class Environment:
    """Handle onto a chain of binding frames."""

    __slots__ = ("frame",)

    def __init__(self, frame: Optional[Frame] = None):
        # A fresh environment has one empty root frame and no parent
        self.frame: Frame = frame if frame is not None else Frame()

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in the current frame, shadowing outer bindings."""
        self.frame.vars[name] = value

    def find(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`, innermost frame first.

        Raises SprigVariableNotFound if no frame on the chain defines it.
        """
        frame = self.frame.find(name)
        if frame is None:
            raise SprigVariableNotFound(name)
        return frame.vars[name]

    def set(self, name: Symbol, value: LispValue) -> None:
        """Overwrite the binding of `name` in the nearest frame that defines it.

        Raises SprigVariableNotFound if the symbol is not bound anywhere.
        """
        frame = self.frame.find(name)
        if frame is None:
            raise SprigVariableNotFound(name)
        frame.vars[name] = value

    def is_defined(self, name: Symbol) -> bool:
        return self.frame.find(name) is not None

    def push_frame(self) -> None:
        self.frame = Frame(outer=self.frame)

    def pop_frame(self) -> None:
        outer = self.frame.outer
        if outer is None:
            raise FrameUnderflowError(
                "should have outer frame, seems like you are trying to remove the global frame"
            )
        self.frame = outer

    @contextmanager
    def scope(self) -> Iterator[Environment]:
        """Push a frame for the duration of the block; pop it on every exit path."""
        self.push_frame()
        try:
            yield self
        finally:
            self.pop_frame()

    def capture_for_closure(self) -> Environment:
        """Return a new handle on a fresh child of the current frame."""
        return Environment(Frame(outer=self.frame))

    def fork(self) -> Environment:
        """Return a new handle sharing the current frame."""
        return Environment(self.frame)

    @property
    def depth(self) -> int:
        """Number of frames between the current frame and the root (root is 0)."""
        n = 0
        frame = self.frame
        while frame.outer is not None:
            frame = frame.outer
            n += 1
        return n

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self.frame._write_vars(buffer)
            if self.frame.outer is not None:
                buffer.write(" -> ...")  # indicate parent exists
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        chain = []
        frame: Optional[Frame] = self.frame
        while frame is not None:
            with StringIO() as env_buf:
                frame._write_vars(env_buf)
                chain.append(env_buf.getvalue())
            frame = frame.outer
        return f"<Environment chain: {' -> '.join(chain)}>"
