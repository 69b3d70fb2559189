"""Polynomial expressions over a ring, read by operator-precedence parsing."""

from __future__ import annotations

import re
from enum import IntEnum
from typing import Callable, Iterable, Mapping, Union

from .intparse import ParseError, collect_int, eat_int
from .poly import Poly, PolyRing, Term
from .varnames import VariableError, is_var_start, parse_var

IntLookup = Union[Mapping[str, int], Callable[[str], int], None]
PolyLookup = Union[Mapping[str, object], Callable[[str], object], None]

_IDENT = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


class PolyParseError(ParseError):
    """Raised when a polynomial expression cannot be read."""


class _Tok(IntEnum):
    EOI = 0
    INT = 1
    POLY = 2
    LP = 3
    RP = 4
    PLUS = 7
    MINUS = 8
    MULT = 9
    DIV = 10
    MOD = 11
    EXP = 12
    UPLUS = 16
    UMINUS = 17


# Left (stack) and right (input) precedence of each token.
_PREC = {
    _Tok.EOI: (0, 0),
    _Tok.INT: (11, 10),
    _Tok.POLY: (11, 10),
    _Tok.LP: (1, 11),
    _Tok.RP: (13, 1),
    _Tok.PLUS: (6, 5),
    _Tok.MINUS: (6, 5),
    _Tok.MULT: (8, 7),
    _Tok.DIV: (8, 7),
    _Tok.MOD: (8, 7),
    _Tok.EXP: (8, 9),
    _Tok.UPLUS: (8, 10),
    _Tok.UMINUS: (8, 10),
}

_NARGS = {
    _Tok.PLUS: 2,
    _Tok.MINUS: 2,
    _Tok.MULT: 2,
    _Tok.DIV: 2,
    _Tok.MOD: 2,
    _Tok.EXP: 1,
    _Tok.UMINUS: 1,
}


def _is_digit(c: str) -> bool:
    return "0" <= c <= "9"


def _is_ident_start(c: str) -> bool:
    return c == "_" or (c.isascii() and c.isalpha())


def _is_binop(tok: int) -> bool:
    return _Tok.PLUS <= tok <= _Tok.EXP


def _is_operator(tok: int) -> bool:
    return _is_binop(tok) or tok in (_Tok.UPLUS, _Tok.UMINUS)


def _is_unary_context(tok: int) -> bool:
    return tok in (_Tok.EOI, _Tok.LP) or _is_binop(tok)


class _PolyParser:
    def __init__(self, ring, text, comp, int_lookup, poly_lookup) -> None:
        self.ring = ring
        self.text = "".join(text.split())
        self.comp = comp
        self.int_lookup = int_lookup
        self.poly_lookup = poly_lookup
        self.pos = 0
        self.tok = _Tok.EOI
        self.val: Poly | None = None
        self.expo = 0
        self.parens = 0
        self.ops: list[int] = [_Tok.EOI]
        self.op_exps: list[int] = [0]
        self.vals: list[Poly] = []

    def _error(self, message: str) -> PolyParseError:
        return PolyParseError(message, self.text[: self.pos])

    def _peek(self) -> str:
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def _resolve_int(self, name: str) -> int:
        lookup = self.int_lookup
        if lookup is None:
            raise self._error(f"unknown identifier {name}")
        try:
            value = lookup(name) if callable(lookup) else lookup[name]
        except KeyError:
            raise self._error(f"unknown identifier {name}") from None
        return int(value)

    def _lookup_poly(self, name: str) -> Poly | None:
        lookup = self.poly_lookup
        try:
            value = lookup(name) if callable(lookup) else lookup.get(name)
        except KeyError:
            return None
        if value is None:
            return None
        if isinstance(value, Poly):
            return Poly(self.ring, (Term(t.coef, t.exps, self.comp) for t in value))
        return self.ring.constant(int(value), self.comp)

    def _exponent(self, c: str) -> None:
        if c == "(":
            self.pos += 1
            try:
                value, used = eat_int(self.text[self.pos :], self.int_lookup)
            except ParseError as exc:
                raise self._error(exc.message) from exc
            self.pos += used
            if self._peek() != ")":
                raise self._error("missing right parenthesis")
            self.pos += 1
        elif c and _is_ident_start(c):
            match = _IDENT.match(self.text, self.pos)
            self.pos = match.end()
            value = self._resolve_int(match.group())
        elif c and _is_digit(c):
            value, self.pos = collect_int(self.text, self.pos)
        else:
            raise self._error("bad exponent")
        self.expo = value

    def _variable(self) -> Poly:
        try:
            index, used = parse_var(self.text[self.pos :], self.ring.varnames)
        except VariableError as exc:
            raise self._error(str(exc)) from exc
        if index is not None:
            self.pos += used
            return self.ring.var(index, self.comp)
        if self.poly_lookup is not None:
            match = _IDENT.match(self.text, self.pos)
            if match:
                value = self._lookup_poly(match.group())
                if value is not None:
                    self.pos = match.end()
                    return value
        self.pos += used
        raise self._error("ring variable not defined")

    def _next(self) -> None:
        last = self.tok
        c = self._peek()
        terminal_before = last in (_Tok.INT, _Tok.RP, _Tok.POLY)
        if c and (c in "({" or is_var_start(c)) and terminal_before:
            self.tok = _Tok.MULT
            return
        if c and _is_digit(c) and last in (_Tok.RP, _Tok.POLY):
            self.tok = _Tok.EXP
            return
        if last == _Tok.EXP:
            self._exponent(c)
            self.tok = _Tok.INT
            return

        if not c:
            self.tok = _Tok.EOI
        elif c == "*":
            self.pos += 1
            if self._peek() == "*":
                self.pos += 1
                self.tok = _Tok.EXP
            else:
                self.tok = _Tok.MULT
        elif c in "/&^":
            self.pos += 1
            self.tok = {"/": _Tok.DIV, "&": _Tok.MOD, "^": _Tok.EXP}[c]
        elif c == "(":
            self.pos += 1
            self.parens += 1
            self.tok = _Tok.LP
        elif c == ")":
            if self.parens == 0:
                self.tok = _Tok.EOI
            else:
                self.pos += 1
                self.parens -= 1
                self.tok = _Tok.RP
        elif c == "+":
            self.pos += 1
            self.tok = _Tok.UPLUS if _is_unary_context(last) else _Tok.PLUS
        elif c == "-":
            self.pos += 1
            self.tok = _Tok.UMINUS if _is_unary_context(last) else _Tok.MINUS
        elif is_var_start(c):
            self.val = self._variable()
            self.tok = _Tok.POLY
        elif _is_digit(c):
            n, self.pos = collect_int(self.text, self.pos)
            self.val = self.ring.constant(n, self.comp)
            self.tok = _Tok.POLY
        else:
            self.tok = _Tok.EOI
        if (_is_operator(last) or last == _Tok.LP) and (
            _is_binop(self.tok) or self.tok == _Tok.RP
        ):
            raise self._error("missing operand")

    def _divisor(self, f: Poly) -> int:
        if f.is_zero():
            raise self._error("attempt to divide by zero")
        lead = f.leading()
        if len(f) != 1 or any(lead.exps):
            raise self._error("can only divide by a constant")
        return lead.coef

    def _action(self, op: int, expo: int) -> None:
        args = []
        for _ in range(_NARGS.get(op, 0)):
            if not self.vals:
                raise self._error("too few operands")
            args.append(self.vals.pop())
        if op in (_Tok.EOI, _Tok.LP, _Tok.RP, _Tok.UPLUS):
            return
        ring = self.ring
        if op == _Tok.UMINUS:
            result = -args[0]
        elif op == _Tok.EXP:
            result = ring.unit(self.comp)
            for _ in range(expo):
                result = result * args[0]
        else:
            right, left = args
            if op == _Tok.PLUS:
                result = left + right
            elif op == _Tok.MINUS:
                result = left - right
            elif op == _Tok.MULT:
                result = right * left
            elif op == _Tok.DIV:
                inv = ring.reciprocal(self._divisor(right))
                result = left.scaled_shift(inv, (0,) * ring.nvars)
            elif op == _Tok.MOD:
                self._divisor(right)
                result = ring.zero()
            else:
                raise self._error("internal error: unexpected operator")
        self.vals.append(result)

    def run(self) -> Poly:
        self._next()
        while True:
            top = self.ops[-1]
            if self.tok == _Tok.EOI and top == _Tok.EOI:
                if not self.vals:
                    raise self._error("missing operand")
                result = self.vals.pop()
                break
            if self.tok == _Tok.POLY:
                self.vals.append(self.val)
                self._next()
            elif self.tok == _Tok.INT:
                self.op_exps[-1] = self.expo
                self._next()
            elif _PREC[top][0] <= _PREC[self.tok][1]:
                self.ops.append(self.tok)
                self.op_exps.append(0)
                self._next()
            else:
                while True:
                    last = self.ops.pop()
                    expo = self.op_exps.pop()
                    self._action(last, expo)
                    if _PREC[self.ops[-1]][0] < _PREC[last][1]:
                        break
        if self.pos != len(self.text):
            raise self._error("premature end of expression")
        return result


def parse_poly(
    ring: PolyRing,
    text: str,
    comp: int = 1,
    int_lookup: IntLookup = None,
    poly_lookup: PolyLookup = None,
) -> Poly:
    """Read ``text`` as a polynomial in row ``comp`` of ``ring``.

    Juxtaposition multiplies (``2xy``) and a number after a variable or a
    closing parenthesis is an exponent (``x2`` is ``x^2``). Names in
    exponents are resolved through ``int_lookup``; names that are not ring
    variables are looked up as polynomials through ``poly_lookup``.
    Blanks are ignored. Division is allowed by nonzero constants only.
    """
    return _PolyParser(ring, text, comp, int_lookup, poly_lookup).run()


def read_poly(
    ring: PolyRing,
    lines: Iterable[str],
    comp: int = 1,
    int_lookup: IntLookup = None,
    poly_lookup: PolyLookup = None,
) -> Poly:
    """The sum of the polynomials given on each of ``lines``."""
    total = ring.zero()
    for line in lines:
        total = total + parse_poly(ring, line, comp, int_lookup, poly_lookup)
    return total