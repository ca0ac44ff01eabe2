"""
  Sprig Reader: Lexer and Parser

- Streaming, lazy parsing
- Emits the evaluator's value model directly (code is data):

    - #nil                 -> Nil
    - #t / #f              -> True / False
    - integers             -> int (float outside the 128-bit range)
    - floats               -> float
    - strings              -> str (escapes resolved)
    - reserved words       -> Operation
    - other symbols        -> Symbol
    - (a b c)              -> Python list (an unevaluated expression)
    - 'x                   -> [Operation.QUOTE, x]
"""

from __future__ import annotations

import re
from typing import Iterable, Iterator, Optional

from sprig import INT_MAX, INT_MIN, SExpression
from sprig.errors import SprigReadError
from sprig.types.nil import Nil
from sprig.types.operation import Operation
from sprig.types.symbol import Symbol


TOKEN_RE = re.compile(
    r"\s*("
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<quote>')"  # quote shorthand
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r'|(?P<symbol>[^\s()\'";]+)'  # fallback: symbols and numbers
    r")",
    re.DOTALL,
)

STRING_ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    '"': '"',
    "\\": "\\",
}

LITERALS: dict[str, SExpression] = {
    "#nil": Nil,
    "#t": True,
    "#f": False,
}

INT_RE = re.compile(r"[+-]?\d+")


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if m is None:
            if source[pos:].strip() == "":
                break
            if source[pos:].lstrip().startswith('"'):
                raise SprigReadError(f"Unterminated string at {pos}")
            raise SprigReadError(f"Unexpected char at {pos}: {source[pos]!r}")
        pos = m.end()
        if m.group("comment"):
            continue
        for nm in ("quote", "lparen", "rparen", "string", "symbol"):
            if m.group(nm) is not None:
                yield nm, m.group(nm)
                break


def _unescape(body: str) -> str:
    out = []
    chars = iter(body)
    for c in chars:
        if c == "\\":
            nxt = next(chars, "")
            out.append(STRING_ESCAPES.get(nxt, nxt))
        else:
            out.append(c)
    return "".join(out)


def parse_atom(text: str) -> SExpression:
    """Convert a bare token into a literal, an Operation, or a Symbol."""
    if text in LITERALS:
        return LITERALS[text]
    if INT_RE.fullmatch(text):
        value = int(text)
        if INT_MIN <= value <= INT_MAX:
            return value
        return float(text)
    if "_" not in text:
        try:
            return float(text)
        except ValueError:
            pass
    op = Operation.lookup(text)
    if op is not None:
        return op
    return Symbol(text)


class TokenStream:
    def __init__(self, token_iter: Iterable[tuple[str, str]]):
        self.tokens = iter(token_iter)
        self.buffer: list[tuple[str, str]] = []

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def parse_expr(self) -> Optional[SExpression]:
        """Parse one form; returns None at end of input."""
        tok_type, tok_val = self.peek()
        if tok_type is None:
            return None

        if tok_type == "symbol":
            self.advance()
            return parse_atom(tok_val)

        if tok_type == "string":
            self.advance()
            return _unescape(tok_val[1:-1])

        if tok_type == "quote":
            self.advance()
            if self.peek()[0] is None:
                raise SprigReadError("Expected a form after quote")
            return [Operation.QUOTE, self.parse_expr()]

        if tok_type == "lparen":
            self.advance()
            items = []
            while True:
                nxt = self.peek()[0]
                if nxt == "rparen":
                    self.advance()
                    break
                if nxt is None:
                    raise SprigReadError("Unmatched '('")
                items.append(self.parse_expr())
            return items

        if tok_type == "rparen":
            raise SprigReadError("Unexpected ')'")

        raise SprigReadError(f"Unknown token: {tok_type} {tok_val}")

    def parse_all(self) -> Iterator[SExpression]:
        while True:
            tok_type, _ = self.peek()
            if tok_type is None:
                break
            yield self.parse_expr()


def parse(source: str) -> list[SExpression]:
    """Read every top-level form in `source`."""
    return list(TokenStream(lex(source)).parse_all())


def parse_program(source: str) -> list[SExpression]:
    """Read `source` as a single `(module form ...)` expression."""
    return [Operation.MODULE, *parse(source)]
