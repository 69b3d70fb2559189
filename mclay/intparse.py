"""Integer expression evaluation by operator-precedence parsing."""

from __future__ import annotations

from enum import IntEnum
from typing import Callable, Mapping, Union

Lookup = Union[Mapping[str, int], Callable[[str], int], None]


class ParseError(ValueError):
    """Raised when an integer expression cannot be evaluated."""

    def __init__(self, message: str, context: str | None = None) -> None:
        text = message if context is None else f"{message} at: {context}"
        super().__init__(text)
        self.message = message
        self.context = context


class _Tok(IntEnum):
    EOI = 0
    INT = 1
    POLY = 2
    LT = 3
    LE = 4
    GT = 5
    GE = 6
    EQ = 7
    NE = 8
    OR = 9
    AND = 10
    PLUS = 11
    MINUS = 12
    MULT = 13
    DIV = 14
    MOD = 15
    EXP = 16
    LP = 17
    RP = 18
    UMINUS = 19
    UPLUS = 20
    NOT = 21


# Indexed by token: left (stack) and right (input) precedences, operand counts.
_FPREC = (0, 11, 11, 4, 4, 4, 4, 4, 4, 3, 3, 6, 6, 8, 8, 8, 8, 1, 13, 8, 8, 8)
_GPREC = (0, 10, 10, 3, 3, 3, 3, 3, 3, 2, 2, 5, 5, 7, 7, 7, 9, 11, 1, 10, 10, 10)
_NARGS = (0, 1, 1, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 0, 0, 1, 0, 1)


def _is_digit(c: str) -> bool:
    return "0" <= c <= "9"


def _is_ident_start(c: str) -> bool:
    return c == "_" or (c.isascii() and c.isalpha())


def _is_ident_char(c: str) -> bool:
    return c == "_" or (c.isascii() and c.isalnum())


def _is_binop(tok: int) -> bool:
    return _Tok.PLUS <= tok <= _Tok.EXP


def _is_operator(tok: int) -> bool:
    return _is_binop(tok) or tok == _Tok.UMINUS


def _is_unary_context(tok: int) -> bool:
    return tok not in (_Tok.RP, _Tok.INT, _Tok.POLY)


def _c_div(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def _c_mod(a: int, b: int) -> int:
    return a - b * _c_div(a, b)


def collect_int(text: str, pos: int) -> tuple[int, int]:
    """Read the run of decimal digits starting at ``pos``.

    Returns the value and the position just after the last digit.
    """
    if pos >= len(text) or not _is_digit(text[pos]):
        raise ValueError(f"no digit at position {pos} of {text!r}")
    end = pos
    while end < len(text) and _is_digit(text[end]):
        end += 1
    return int(text[pos:end]), end


def _resolve(lookup: Lookup, name: str) -> int:
    if lookup is None:
        raise ParseError(f"unknown identifier {name}")
    try:
        value = lookup(name) if callable(lookup) else lookup[name]
    except KeyError:
        raise ParseError(f"unknown identifier {name}") from None
    return int(value)


class _IntParser:
    def __init__(self, text: str, lookup: Lookup) -> None:
        self.text = text
        self.pos = 0
        self.lookup = lookup
        self.tok = _Tok.EOI
        self.val = 0
        self.parens = 0
        self.ops: list[int] = [_Tok.EOI]
        self.vals: list[int] = []

    def _error(self, message: str) -> ParseError:
        return ParseError(message, self.text[: self.pos])

    def _peek(self) -> str:
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def _pair(self, ch: str, tok1: int, tok2: int) -> int:
        if self._peek() == ch:
            self.pos += 1
            return tok1
        return tok2

    def _next(self) -> None:
        last = self.tok
        c = self._peek()
        if not c:
            self.tok = _Tok.EOI
        else:
            self.pos += 1
            if c == "*":
                self.tok = self._pair("*", _Tok.EXP, _Tok.MULT)
            elif c == "/":
                self.tok = _Tok.DIV
            elif c == "|":
                self.tok = self._pair("|", _Tok.OR, _Tok.EOI)
            elif c == "&":
                self.tok = self._pair("&", _Tok.AND, _Tok.MOD)
            elif c == "^":
                self.tok = _Tok.EXP
            elif c == "(":
                self.parens += 1
                self.tok = _Tok.LP
            elif c == ")":
                if self.parens == 0:
                    self.pos -= 1
                    self.tok = _Tok.EOI
                else:
                    self.parens -= 1
                    self.tok = _Tok.RP
            elif c == "+":
                self.tok = _Tok.UPLUS if _is_unary_context(self.tok) else _Tok.PLUS
            elif c == "-":
                self.tok = _Tok.UMINUS if _is_unary_context(self.tok) else _Tok.MINUS
            elif c == ">":
                self.tok = self._pair("=", _Tok.GE, _Tok.GT)
            elif c == "<":
                self.tok = self._pair("=", _Tok.LE, _Tok.LT)
            elif c == "=":
                self.tok = self._pair("=", _Tok.EQ, _Tok.EQ)
            elif c == "!":
                self.tok = self._pair("=", _Tok.NE, _Tok.NOT)
            elif _is_digit(c):
                self.val, self.pos = collect_int(self.text, self.pos - 1)
                self.tok = _Tok.INT
            elif _is_ident_start(c):
                start = self.pos - 1
                while self.pos < len(self.text) and _is_ident_char(self.text[self.pos]):
                    self.pos += 1
                self.val = _resolve(self.lookup, self.text[start : self.pos])
                self.tok = _Tok.INT
            else:
                self.pos -= 1
                self.tok = _Tok.EOI
        self._check(last, self.tok)

    def _check(self, last: int, tok: int) -> None:
        if last in (_Tok.INT, _Tok.RP) and tok in (_Tok.INT, _Tok.LP):
            raise self._error("missing operator")
        if (_is_operator(last) or last == _Tok.LP) and (_is_binop(tok) or tok == _Tok.RP):
            raise self._error("missing operand")

    def _action(self, op: int) -> None:
        args = []
        for _ in range(_NARGS[op]):
            if not self.vals:
                raise self._error("too few operands")
            args.append(self.vals.pop())
        if op in (_Tok.EOI, _Tok.LP, _Tok.RP, _Tok.UPLUS):
            return
        if op == _Tok.NOT:
            self.vals.append(int(not args[0]))
            return
        if op == _Tok.UMINUS:
            self.vals.append(-args[0])
            return
        right, left = args
        if op == _Tok.EQ:
            result = int(left == right)
        elif op == _Tok.NE:
            result = int(left != right)
        elif op == _Tok.OR:
            result = int(bool(left or right))
        elif op == _Tok.AND:
            result = int(bool(left and right))
        elif op == _Tok.GT:
            result = int(left > right)
        elif op == _Tok.GE:
            result = int(left >= right)
        elif op == _Tok.LT:
            result = int(left < right)
        elif op == _Tok.LE:
            result = int(left <= right)
        elif op == _Tok.PLUS:
            result = left + right
        elif op == _Tok.MINUS:
            result = left - right
        elif op == _Tok.MULT:
            result = left * right
        elif op in (_Tok.DIV, _Tok.MOD):
            if right == 0:
                raise ParseError("attempt to divide by zero")
            result = _c_div(left, right) if op == _Tok.DIV else _c_mod(left, right)
        elif op == _Tok.EXP:
            result = left**right if right > 0 else 1
        else:
            raise ParseError("internal error: unexpected operator")
        self.vals.append(result)

    def run(self) -> tuple[int, int]:
        self._next()
        while True:
            top = self.ops[-1]
            if self.tok == _Tok.EOI and top == _Tok.EOI:
                if not self.vals:
                    raise ParseError("missing operand")
                return self.vals.pop(), self.pos
            if self.tok == _Tok.INT:
                self.vals.append(self.val)
                self._next()
            elif _FPREC[top] <= _GPREC[self.tok]:
                self.ops.append(self.tok)
                self._next()
            else:
                while True:
                    last = self.ops.pop()
                    self._action(last)
                    if _FPREC[self.ops[-1]] < _GPREC[last]:
                        break


def eat_int(text: str, lookup: Lookup = None) -> tuple[int, int]:
    """Evaluate the integer expression at the start of ``text``.

    Returns the value and the position just after the expression.
    Identifiers are resolved through ``lookup``, a mapping or a callable.
    """
    return _IntParser(text, lookup).run()


def parse_int(text: str, lookup: Lookup = None) -> int:
    """Value of the expression at the start of ``text``; trailing text is ignored."""
    value, _ = eat_int(text, lookup)
    return value


def read_int(text: str, lookup: Lookup = None) -> int:
    """Value of ``text``, which must consist of one expression and nothing else."""
    value, end = eat_int(text, lookup)
    if end != len(text):
        raise ParseError("premature end of expression", text[:end])
    return value