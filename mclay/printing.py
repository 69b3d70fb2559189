"""Text rendering of polynomials and matrices."""

from __future__ import annotations

from math import isqrt

from .matrix import Matrix
from .poly import Poly, PolyRing


def _lift(p: int, a: int) -> tuple[int, int]:
    """Rational reconstruction of ``a`` mod ``p``: (numerator, denominator),
    with denominator 0 when no small fraction represents ``a``."""
    bound = isqrt(p // 2)
    r0, r1 = p, a % p
    t0, t1 = 0, 1
    while r1 > bound:
        q = r0 // r1
        r0, r1 = r1, r0 - q * r1
        t0, t1 = t1, t0 - q * t1
    if t1 == 0 or abs(t1) > bound:
        return a, 0
    if t1 < 0:
        return -r1, -t1
    return r1, t1


def _int_text(m: int, show_one: bool, show_plus: bool) -> str:
    sign = "-" if m < 0 else ("+" if show_plus else "")
    mag = abs(m)
    return sign + (str(mag) if mag != 1 or show_one else "")


def format_poly(ring: PolyRing, f: Poly | None, comp: int, maxterms: int = 10) -> str:
    """The entry of ``f`` in row ``comp``, e.g. ``3*x^2*y-z+1``; '0' if there is none."""
    if maxterms <= 0:
        raise ValueError("maxterms must be positive")
    out: list[str] = []
    nterms = 0
    for term in f.terms() if f is not None else []:
        if term.comp != comp:
            continue
        is_constant = not any(term.exps)
        if nterms % maxterms == maxterms - 1:
            out.append("\n  ")
        nexps = 0
        m, n = _lift(ring.characteristic, term.coef)
        if n == 0:
            m, n = term.coef, 1
        if n == 1:
            if abs(m) != 1 or is_constant:
                nexps += 1
            out.append(_int_text(m, is_constant, nterms > 0))
        else:
            nexps += 1
            out.append(_int_text(m, True, nterms > 0))
            out.append("/")
            out.append(_int_text(n, False, False))
        for name, e in zip(ring.varnames, term.exps):
            if e > 0:
                if nexps > 0:
                    out.append("*")
                out.append(name)
                nexps += 1
            if e > 1:
                out.append("^")
                out.append(_int_text(e, False, False))
        nterms += 1
    if nterms == 0:
        return "0"
    return "".join(out)


def format_matrix(ring: PolyRing, matrix: Matrix, maxterms: int = 10) -> str:
    """The matrix written row by row in braces."""
    rows = []
    for i in range(1, matrix.nrows() + 1):
        entries = ",\n    ".join(format_poly(ring, f, i, maxterms) for f in matrix.gens)
        rows.append("  {" + entries + "}")
    return "{\n" + ",\n".join(rows) + "\n}\n"