"""Monomial ideals and the invariants read off them: codimension,
minimal primes, degree and k-bases."""

from __future__ import annotations

from typing import Callable, Iterable, Iterator, Sequence


def _divides(g: Sequence[int], t: Sequence[int]) -> bool:
    return all(a <= b for a, b in zip(g, t))


class MonomialIdeal:
    """An ideal generated by monomials in ``nvars`` variables.

    Generators are exponent tuples. Only a minimal set is kept, in the
    order in which the surviving generators were given.
    """

    def __init__(self, nvars: int, gens: Iterable[Sequence[int]] = ()) -> None:
        if nvars < 0:
            raise ValueError("the number of variables cannot be negative")
        self.nvars = int(nvars)
        kept: list[tuple[int, ...]] = []
        for raw in gens:
            g = self._check(raw)
            if any(_divides(h, g) for h in kept):
                continue
            kept = [h for h in kept if not _divides(g, h)]
            kept.append(g)
        self.gens: tuple[tuple[int, ...], ...] = tuple(kept)

    def _check(self, exps: Sequence[int]) -> tuple[int, ...]:
        t = tuple(int(e) for e in exps)
        if len(t) != self.nvars:
            raise ValueError(f"monomial {t!r} does not have {self.nvars} exponents")
        if any(e < 0 for e in t):
            raise ValueError(f"monomial {t!r} has a negative exponent")
        return t

    def __repr__(self) -> str:
        return f"MonomialIdeal({self.nvars}, {list(self.gens)!r})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, MonomialIdeal):
            return NotImplemented
        return self.nvars == other.nvars and set(self.gens) == set(other.gens)

    def __hash__(self) -> int:
        return hash((self.nvars, frozenset(self.gens)))

    def __len__(self) -> int:
        return len(self.gens)

    def __iter__(self) -> Iterator[tuple[int, ...]]:
        return iter(self.gens)

    def contains(self, exps: Sequence[int]) -> bool:
        """True if the monomial ``exps`` lies in the ideal."""
        t = self._check(exps)
        return any(_divides(g, t) for g in self.gens)

    def radical(self) -> "MonomialIdeal":
        """The ideal generated by the supports of the generators."""
        return MonomialIdeal(self.nvars, (tuple(1 if e > 0 else 0 for e in g) for g in self.gens))

    def divide(self, mask: Sequence[int]) -> "MonomialIdeal":
        """Set the variables outside ``mask`` to 1 and move the remaining ones,
        in order, to the front; the later positions become zero."""
        mask = self._mask(mask)
        keep = [i for i, m in enumerate(mask) if m == 1]
        pad = (0,) * (self.nvars - len(keep))
        return MonomialIdeal(self.nvars, (tuple(g[i] for i in keep) + pad for g in self.gens))

    def restrict(self, mask: Sequence[int]) -> "MonomialIdeal":
        """Set the variables outside ``mask`` to 1, keeping positions."""
        mask = self._mask(mask)
        return MonomialIdeal(
            self.nvars,
            (tuple(e if m == 1 else 0 for e, m in zip(g, mask)) for g in self.gens),
        )

    def _mask(self, mask: Sequence[int]) -> tuple[int, ...]:
        m = tuple(int(v) for v in mask)
        if len(m) != self.nvars:
            raise ValueError(f"mask {m!r} does not have {self.nvars} entries")
        return m


def red_exp(t: Sequence[int], state: Sequence[int]) -> int:
    """Classify monomial ``t`` against a partial choice of prime.

    ``state[i]`` is 1 if variable i is in the prime, -1 if it is excluded
    and 0 if undecided. Returns 0 if ``t`` is already in the prime, -1 if
    every variable of ``t`` is excluded, and 1 otherwise.
    """
    all_excluded = True
    for e, s in zip(t, state):
        if e > 0:
            if s == 1:
                return 0
            if s == 0:
                all_excluded = False
    return -1 if all_excluded else 1


def _search(
    gens: Sequence[tuple[int, ...]],
    state: list[int],
    start: int,
    codim: int,
    bound: Callable[[], int],
    emit: Callable[[int, tuple[int, ...]], None],
) -> None:
    if codim > bound():
        return
    state = list(state)
    k = start
    while True:
        if k == len(gens):
            emit(codim, tuple(1 if s == 1 else 0 for s in state))
            return
        t = gens[k]
        kind = red_exp(t, state)
        if kind == 0:
            k += 1
            continue
        if kind == -1:
            return
        for i in range(len(t)):
            if t[i] > 0 and state[i] == 0:
                state[i] = 1
                _search(gens, state, k + 1, codim + 1, bound, emit)
                state[i] = -1
        return


def find_ass_primes(ideal: MonomialIdeal, limit: int | None = None) -> list[tuple[int, tuple[int, ...]]]:
    """Primes generated by variables that contain ``ideal``, found by branching
    on the variables of each generator.

    Each is given as (codimension, mask) with mask[i] == 1 for the variables
    of the prime. Every minimal prime is among them. Branches whose
    codimension exceeds ``limit`` (default: the number of variables) are cut.
    """
    top = ideal.nvars + 1 if limit is None else int(limit)
    found: list[tuple[int, tuple[int, ...]]] = []
    _search(ideal.gens, [0] * ideal.nvars, 0, 0, lambda: top, lambda c, m: found.append((c, m)))
    return found


def _nvars_of(ideals: Sequence[MonomialIdeal]) -> int:
    if not ideals:
        raise ValueError("at least one row ideal is needed")
    n = ideals[0].nvars
    if any(ideal.nvars != n for ideal in ideals):
        raise ValueError("row ideals have different numbers of variables")
    return n


def codim(ideals: Sequence[MonomialIdeal]) -> int:
    """Codimension of a free module modulo a monomial submodule, given by the
    monomial ideal of each row; the number of variables plus one if the
    quotient is zero."""
    ideals = list(ideals)
    top = _nvars_of(ideals) + 1

    def got(c: int, _mask: tuple[int, ...]) -> None:
        nonlocal top
        if c <= top:
            top = c

    for ideal in ideals:
        rad = ideal.radical()
        _search(rad.gens, [0] * rad.nvars, 0, 0, lambda: top, got)
    return top


def minimal_primes(ideals: Sequence[MonomialIdeal]) -> list[tuple[int, ...]]:
    """Masks of the isolated primes of the quotient, one per prime."""
    ideals = list(ideals)
    nvars = _nvars_of(ideals)
    found: list[tuple[int, ...]] = []
    for ideal in ideals:
        rad = ideal.radical()
        _search(rad.gens, [0] * nvars, 0, 0, lambda: nvars + 1, lambda c, m: found.append(m))
    found.reverse()
    result: list[tuple[int, ...]] = []
    for p in found:
        if p in result:
            continue
        smaller = any(
            q != p and all(not (pi == 0 and qi != 0) for pi, qi in zip(p, q)) for q in found
        )
        if not smaller:
            result.append(p)
    return result


def _standard_monomials(
    nvars: int,
    allowed: Callable[[int], bool],
    keep: Callable[[tuple[int, ...]], bool],
    inside: Callable[[tuple[int, ...]], bool],
) -> Iterator[tuple[int, ...]]:
    """Monomials reached from 1 by raising allowed variables, skipping those
    rejected by ``keep`` and not going past those in the ideal; each is
    produced once, in depth-first order."""
    stack: list[tuple[tuple[int, ...], int]] = [((0,) * nvars, 0)]
    while stack:
        mon, i = stack.pop()
        while i < nvars and not allowed(i):
            i += 1
        if i >= nvars:
            continue
        stack.append((mon, i + 1))
        child = mon[:i] + (mon[i] + 1,) + mon[i + 1 :]
        if not keep(child) or inside(child):
            continue
        yield child
        stack.append((child, i))


def monomial_degree(ideal: MonomialIdeal, nvars: int) -> int:
    """Number of monomials in the first ``nvars`` variables outside ``ideal``,
    counting 1 always. The ideal must be artinian in those variables."""
    if not 0 <= nvars <= ideal.nvars:
        raise ValueError(f"nvars must be between 0 and {ideal.nvars}")
    for i in range(nvars):
        pure = any(g[i] > 0 and all(e == 0 for j, e in enumerate(g) if j != i) for g in ideal.gens)
        if not pure:
            raise ValueError(f"ideal is not artinian in variable {i}")
    count = 1
    for _ in _standard_monomials(
        ideal.nvars, lambda i: i < nvars, lambda m: True, ideal.contains
    ):
        count += 1
    return count


def module_degree(ideals: Sequence[MonomialIdeal], codimension: int) -> int:
    """Degree of the quotient: the sum, over primes of the given codimension
    in each row, of the length of the row ideal localized there."""
    ideals = list(ideals)
    _nvars_of(ideals)
    total = 0
    for ideal in ideals:
        for c, mask in find_ass_primes(ideal.radical(), codimension):
            if c == codimension:
                total += monomial_degree(ideal.divide(mask), codimension)
    return total


def k_basis(
    ideals: Sequence[MonomialIdeal],
    row_degrees: Sequence[int],
    weights: Sequence[int],
    mask: Sequence[int] | None = None,
    lo: int = -5000,
    hi: int = 5000,
    maxdegree: int = 512,
    isbasis: bool = True,
) -> list[tuple[tuple[int, ...], int]]:
    """Monomials (exponents, row) outside the row ideals whose degree lies in
    [lo, hi], using only the variables of ``mask``.

    With ``isbasis`` false, a row whose degree exceeds ``hi`` still
    contributes its basis vector when that degree is at least ``lo``.
    """
    ideals = list(ideals)
    nvars = _nvars_of(ideals)
    if len(row_degrees) != len(ideals):
        raise ValueError("need one degree for each row")
    weights = tuple(int(w) for w in weights)
    if len(weights) != nvars:
        raise ValueError(f"need {nvars} weights")
    allowed = tuple(1 for _ in range(nvars)) if mask is None else tuple(int(m) for m in mask)
    if len(allowed) != nvars:
        raise ValueError(f"mask does not have {nvars} entries")
    if any(m == 1 and w <= 0 for m, w in zip(allowed, weights)):
        raise ValueError("weights of the allowed variables must be positive")

    def weight(mon: tuple[int, ...]) -> int:
        return sum(w * e for w, e in zip(weights, mon))

    result: list[tuple[tuple[int, ...], int]] = []
    zero = (0,) * nvars
    for comp, (ideal, comp_deg) in enumerate(zip(ideals, row_degrees), start=1):
        if comp_deg > hi and isbasis:
            continue
        head = ideal.restrict(allowed)
        if not head.contains(zero) and comp_deg >= lo:
            result.append((zero, comp))
        if comp_deg > hi:
            continue

        def keep(mon: tuple[int, ...], base: int = comp_deg) -> bool:
            e = weight(mon)
            return base + e <= hi and e <= maxdegree

        for mon in _standard_monomials(nvars, lambda i: allowed[i] == 1, keep, head.contains):
            if comp_deg + weight(mon) >= lo:
                result.append((mon, comp))
    return result