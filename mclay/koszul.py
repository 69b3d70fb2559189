"""Koszul complexes of the variables of a ring or of the entries of a row."""

from __future__ import annotations

from itertools import combinations

from .matrix import Matrix
from .poly import Poly, PolyRing, Term


def binom(n: int, p: int) -> int:
    """n choose p."""
    result = 1
    for i in range(p):
        result = result * (n - i) // (i + 1)
    return result


def subset(small, big) -> bool:
    """True if every entry of ``small`` is among those of ``big``."""
    return len(small) <= len(big) and all(e in big for e in small)


def kremove(t, i: int) -> tuple:
    """``t`` without its ``i``-th entry, counting from 1."""
    if not 1 <= i <= len(t):
        raise IndexError(f"no entry {i} in {t!r}")
    t = tuple(t)
    return t[: i - 1] + t[i:]


def loc(n: int, t) -> int:
    """Position, counting from 0, of the increasing subset ``t`` of 1..n
    among all subsets of its size in lexicographic order."""
    entries = list(t)
    remaining = len(entries)
    if remaining == 0:
        return 0
    total = 0
    it = iter(entries)
    current = next(it)
    for i in range(1, n + 1):
        if current == i:
            remaining -= 1
            if remaining == 0:
                return total
            current = next(it)
        else:
            total += binom(n - i, remaining - 1)
    raise ValueError(f"{t!r} is not an increasing subset of 1..{n}")


def _move_row(ring: PolyRing, f: Poly, row: int) -> Poly:
    return Poly(ring, (Term(t.coef, t.exps, row) for t in f.terms() if t.comp == 1))


def koszul(ring: PolyRing, n: int | None, p: int, matrix: Matrix | None = None) -> Matrix:
    """The p-th Koszul matrix on the first ``n`` variables, or on the first
    ``n`` entries of the first row of ``matrix`` (all of them if ``n`` is None)."""
    if matrix is None:
        if n is None:
            raise ValueError("n is needed when no matrix is given")
        n = min(n, ring.nvars)

        def degree(t) -> int:
            return sum(ring.weights[i - 1] for i in t)

        def entry(i: int, row: int) -> Poly:
            return ring.var(i - 1, row)

    else:
        if n is None:
            n = matrix.ncols()
        if n > matrix.ncols():
            raise IndexError(f"matrix has only {matrix.ncols()} columns")

        def degree(t) -> int:
            return sum(matrix.deggens[i - 1] for i in t)

        def entry(i: int, row: int) -> Poly:
            return _move_row(ring, matrix.gens[i - 1], row)

    result = Matrix(ring)
    if p <= 0 or p > n:
        return result
    result.degrees = [degree(s) for s in combinations(range(1, n + 1), p - 1)]
    for tcol in combinations(range(1, n + 1), p):
        column = ring.zero()
        sign = 1
        for j in range(p, 0, -1):
            row = 1 + loc(n, kremove(tcol, j))
            f = entry(tcol[j - 1], row)
            column = column - f if sign < 0 else column + f
            sign = -sign
        result.append(column, degree(tcol))
    return result