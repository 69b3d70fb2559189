"""Polynomials and free-module elements over a prime field."""

from __future__ import annotations

from itertools import takewhile
from typing import Iterable, NamedTuple

DEFAULT_CHARACTERISTIC = 31991


class Term(NamedTuple):
    """One term: a coefficient, the exponent of each variable, and a row number."""

    coef: int
    exps: tuple[int, ...]
    comp: int


class PolyRing:
    """A polynomial ring over Z/p with weighted variables.

    Monomials are ordered by weighted degree, then reverse lexicographically,
    then by component, a lower component counting as greater.
    """

    def __init__(self, varnames, weights=None, characteristic: int = DEFAULT_CHARACTERISTIC) -> None:
        names = tuple(varnames)
        if weights is None:
            degs = tuple(1 for _ in names)
        else:
            degs = tuple(int(w) for w in weights)
        if len(degs) != len(names):
            raise ValueError("need one weight for each variable")
        if characteristic < 2:
            raise ValueError(f"characteristic must be a prime, not {characteristic}")
        self.varnames = names
        self.weights = degs
        self.characteristic = int(characteristic)

    def __repr__(self) -> str:
        return f"PolyRing({self.varnames!r}, weights={self.weights!r}, characteristic={self.characteristic})"

    @property
    def nvars(self) -> int:
        return len(self.varnames)

    def degree(self, exps) -> int:
        """Weighted degree of a monomial."""
        return sum(w * e for w, e in zip(self.weights, exps))

    def normalize(self, n: int) -> int:
        """The field element represented by the integer ``n``."""
        return int(n) % self.characteristic

    def reciprocal(self, a: int) -> int:
        a = self.normalize(a)
        if a == 0:
            raise ZeroDivisionError("zero has no reciprocal")
        return pow(a, -1, self.characteristic)

    def sort_key(self, term: Term):
        return (self.degree(term.exps), tuple(-e for e in reversed(term.exps)), -term.comp)

    def compare(self, a: Term, b: Term) -> int:
        """-1, 0 or 1 as the monomial of ``a`` is below, equal to or above that of ``b``."""
        ka, kb = self.sort_key(a), self.sort_key(b)
        return (ka > kb) - (ka < kb)

    def zero(self) -> "Poly":
        return Poly(self)

    def monomial(self, coef: int, exps, comp: int) -> "Poly":
        return Poly(self, [Term(coef, tuple(exps), comp)])

    def unit(self, comp: int) -> "Poly":
        """The basis vector of row ``comp``."""
        return self.monomial(1, (0,) * self.nvars, comp)

    def var(self, j: int, comp: int) -> "Poly":
        """Variable ``j`` (counted from 0) in row ``comp``."""
        if not 0 <= j < self.nvars:
            raise IndexError(f"no variable number {j}")
        exps = [0] * self.nvars
        exps[j] = 1
        return self.monomial(1, exps, comp)

    def constant(self, n: int, comp: int) -> "Poly":
        """The integer ``n`` in row ``comp``; zero if ``n`` vanishes in the field."""
        return self.monomial(n, (0,) * self.nvars, comp)


class Poly:
    """An immutable polynomial vector, its terms kept in decreasing order."""

    __slots__ = ("ring", "_terms")

    def __init__(self, ring: PolyRing, terms: Iterable = ()) -> None:
        combined: dict[tuple[tuple[int, ...], int], int] = {}
        for raw in terms:
            coef, exps, comp = raw
            exps = tuple(int(e) for e in exps)
            if len(exps) != ring.nvars:
                raise ValueError(f"monomial {exps!r} does not have {ring.nvars} exponents")
            key = (exps, int(comp))
            combined[key] = ring.normalize(combined.get(key, 0) + coef)
        kept = [Term(c, e, k) for (e, k), c in combined.items() if c != 0]
        kept.sort(key=ring.sort_key, reverse=True)
        self.ring = ring
        self._terms = tuple(kept)

    def __repr__(self) -> str:
        return f"Poly({list(self._terms)!r})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Poly):
            return NotImplemented
        return self.ring is other.ring and self._terms == other._terms

    def __hash__(self) -> int:
        return hash(self._terms)

    def __len__(self) -> int:
        return len(self._terms)

    def __iter__(self):
        return iter(self._terms)

    def terms(self) -> list[Term]:
        return list(self._terms)

    def is_zero(self) -> bool:
        return not self._terms

    def leading(self) -> Term | None:
        return self._terms[0] if self._terms else None

    def initial(self, nvars: int) -> "Poly":
        """The leading terms that agree with the first term in the first ``nvars`` exponents."""
        if not self._terms:
            return self
        head = self._terms[0].exps[:nvars]
        return Poly(self.ring, takewhile(lambda t: t.exps[:nvars] == head, self._terms))

    def scaled_shift(self, coef: int, exps) -> "Poly":
        """This polynomial multiplied by the monomial ``coef * x^exps``."""
        shift = tuple(exps)
        return Poly(
            self.ring,
            (
                Term(coef * t.coef, tuple(a + b for a, b in zip(t.exps, shift)), t.comp)
                for t in self._terms
            ),
        )

    def monic(self) -> "Poly":
        """This polynomial divided by its leading coefficient."""
        lead = self.leading()
        if lead is None:
            raise ValueError("the zero polynomial cannot be made monic")
        inv = self.ring.reciprocal(lead.coef)
        return Poly(self.ring, (Term(inv * t.coef, t.exps, t.comp) for t in self._terms))

    def _check(self, other) -> bool:
        if not isinstance(other, Poly):
            return False
        if other.ring is not self.ring:
            raise ValueError("polynomials belong to different rings")
        return True

    def __add__(self, other):
        if not self._check(other):
            return NotImplemented
        return Poly(self.ring, self._terms + other._terms)

    def __sub__(self, other):
        if not self._check(other):
            return NotImplemented
        return self + (-other)

    def __neg__(self) -> "Poly":
        return Poly(self.ring, (Term(-t.coef, t.exps, t.comp) for t in self._terms))

    def __mul__(self, other):
        """Ring element times vector: the rows of ``self`` are ignored,
        those of ``other`` are kept."""
        if not self._check(other):
            return NotImplemented
        return Poly(
            self.ring,
            (
                Term(a.coef * b.coef, tuple(x + y for x, y in zip(a.exps, b.exps)), b.comp)
                for a in self._terms
                for b in other._terms
            ),
        )