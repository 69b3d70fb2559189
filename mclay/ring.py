"""Polynomial rings: variables, weights, monomial order blocks and ring sums."""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Sequence, Union

from .matrix import degree_range
from .poly import DEFAULT_CHARACTERISTIC
from .varnames import VariableError, parse_var

_BIG_PRIMES = (
    32749, 32719, 32717, 32713, 32707, 32693, 32687, 32653, 32647, 32633,
    32621, 32611, 32609, 32603, 32587, 32579, 32573, 32569, 32563, 32561,
)
_LITTLE_PRIMES = (
    2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41,
    43, 47, 53, 59, 61, 67, 71, 73, 79, 83, 89, 97, 101,
)


class RingError(ValueError):
    """Raised when a ring description is inconsistent."""


class BlockKind(Enum):
    """Kinds of monomial order block."""

    SYMM = "symm"
    COMP = "c"
    WTFCN = "w"


OrderEntry = Union[int, BlockKind]


@dataclass(frozen=True)
class Block:
    """One block of the monomial order.

    For SYMM blocks ``weights`` are the variable weights and ``varnames``
    the names of the block's variables; for WTFCN blocks ``weights`` is the
    weight vector over all variables.
    """

    kind: BlockKind
    nvars: int = 0
    weights: tuple[int, ...] = ()
    varnames: tuple[str, ...] = ()


def _entry(e) -> OrderEntry:
    if isinstance(e, BlockKind):
        if e is BlockKind.SYMM:
            raise RingError("a block of variables is given by its size")
        return e
    if isinstance(e, str):
        if e == "c":
            return BlockKind.COMP
        if e == "w":
            return BlockKind.WTFCN
        try:
            return int(e)
        except ValueError:
            raise RingError(f"bad monomial order entry {e!r}") from None
    return int(e)


def choose_characteristic(n: int) -> int:
    """The characteristic to use when ``n`` is asked for.

    Small numbers must be primes; -1..-20 select one of the largest primes
    below 2**15; anything unusable falls back to the default with a warning.
    """
    n = int(n)
    if 0 < n < _LITTLE_PRIMES[-1] and n not in _LITTLE_PRIMES:
        n = 0
    if -len(_BIG_PRIMES) <= n < 0:
        return _BIG_PRIMES[-n - 1]
    if n <= 0:
        warnings.warn(
            "characteristic must be a positive prime; "
            f"setting characteristic to {DEFAULT_CHARACTERISTIC}",
            stacklevel=2,
        )
        return DEFAULT_CHARACTERISTIC
    return n


def validate_monomial_order(entries: Iterable, nvars: int, needs_comp: bool = True) -> list[OrderEntry]:
    """Check a monomial order and complete it.

    Entries are block sizes, ``"c"`` (the component) or ``"w"`` (a weight
    vector). Variables not covered get a final block, and a component entry
    is appended when one is needed and missing.
    """
    order = [_entry(e) for e in entries]
    nv = 0
    has_comp = False
    for e in order:
        if e is BlockKind.COMP:
            if has_comp:
                raise RingError("only one component allowed")
            has_comp = True
        elif e is BlockKind.WTFCN:
            continue
        elif e > 0:
            nv += e
        else:
            raise RingError("negative numbers not allowed")
    if nv > nvars:
        raise RingError("too many variables specified")
    if nvars > nv:
        order.append(nvars - nv)
    if needs_comp and not has_comp:
        order.append(BlockKind.COMP)
    return order


def normalize_weight_vector(weights: Sequence[int], degrees: Sequence[int]) -> list[int]:
    """Raise a weight vector by the least multiple of ``degrees`` that makes
    every entry non-negative."""
    w = [int(a) for a in weights]
    d = [int(b) for b in degrees]
    if len(w) != len(d):
        raise RingError(f"weight vector needs {len(d)} entries")
    if any(b <= 0 for b in d):
        raise RingError("variable degrees must be positive")
    k = 0
    for a, b in zip(w, d):
        if a + b * k >= 0:
            continue
        k = (-a - 1) // b + 1
    if k > 0:
        w = [a + k * b for a, b in zip(w, d)]
    return w


def positive_weights(weights: Sequence[int], maxdegree: int = 512) -> list[int]:
    """Shift the weights so the smallest is at least 1, then cap them at
    ``maxdegree`` (with a warning)."""
    w = [int(a) for a in weights]
    if not w:
        raise RingError("no variable weights given")
    low = min(w)
    shift = -low + 1 if low <= 0 else 0
    result = []
    for a in w:
        a += shift
        if a > maxdegree:
            warnings.warn(f"weights must be <= {maxdegree}", stacklevel=2)
            a = maxdegree
        result.append(a)
    return result


class Ring:
    """A polynomial ring: characteristic, variables, their weights, the
    monomial order blocks and the weight vectors used by the order."""

    def __init__(
        self,
        characteristic: int,
        varnames: Sequence[str],
        degrees: Sequence[int],
        monorder: Iterable,
        wtfcns: Sequence[int] = (),
    ) -> None:
        self.characteristic = int(characteristic)
        self.varnames: tuple[str, ...] = tuple(varnames)
        self.degrees: tuple[int, ...] = tuple(int(d) for d in degrees)
        self.monorder: tuple[OrderEntry, ...] = tuple(_entry(e) for e in monorder)
        self.wtfcns: tuple[int, ...] = tuple(int(w) for w in wtfcns)
        if len(self.varnames) != len(self.degrees):
            raise RingError("need one degree for each variable")
        self.comp_loc = -1
        blocks: list[Block] = []
        loc = 0
        wtloc = 0
        nv = self.nvars
        for i, e in enumerate(self.monorder):
            if e is BlockKind.COMP:
                self.comp_loc = i
                blocks.append(Block(BlockKind.COMP))
            elif e is BlockKind.WTFCN:
                vec = self.wtfcns[wtloc : wtloc + nv]
                if len(vec) != nv:
                    raise RingError("not enough weight vector entries")
                wtloc += nv
                blocks.append(Block(BlockKind.WTFCN, nv, vec))
            else:
                if e <= 0 or loc + e > nv:
                    raise RingError(f"bad block size {e}")
                blocks.append(
                    Block(
                        BlockKind.SYMM,
                        e,
                        self.degrees[loc : loc + e],
                        self.varnames[loc : loc + e],
                    )
                )
                loc += e
        self._blocks = tuple(blocks)

    def __repr__(self) -> str:
        return (
            f"Ring({self.characteristic}, {self.varnames!r}, {self.degrees!r}, "
            f"{self.monorder!r}, {self.wtfcns!r})"
        )

    @property
    def nvars(self) -> int:
        return len(self.degrees)

    @property
    def nblocks(self) -> int:
        return len(self.monorder)

    def var_name(self, i: int) -> str | None:
        """Name of variable ``i`` (from 0), or None if there is none."""
        if not 0 <= i < self.nvars:
            return None
        return self.varnames[i]

    def var_index(self, name: str) -> int | None:
        """Position of the variable written as ``name``, or None."""
        try:
            index, _ = parse_var(name, self.varnames)
        except VariableError:
            return None
        return index

    def weight(self, i: int) -> int:
        """Weight of variable ``i`` (from 0); 0 if there is no such variable."""
        if not 0 <= i < self.nvars:
            return 0
        return self.degrees[i]

    def blocks(self) -> list[Block]:
        return list(self._blocks)

    def sum(self, other: "Ring") -> "Ring":
        """The ring in the variables of both; the component comes from ``other``."""
        names = self.varnames + other.varnames
        degs = self.degrees + other.degrees
        order = [e for e in self.monorder if e is not BlockKind.COMP]
        order.extend(other.monorder)
        wt: list[int] = []
        nleft = self.nvars
        for w in self.wtfcns:
            wt.append(w)
            nleft -= 1
            if nleft == 0:
                wt.extend([0] * other.nvars)
                nleft = self.nvars
        nleft = 0
        for w in other.wtfcns:
            if nleft == 0:
                wt.extend([0] * self.nvars)
                nleft = other.nvars
            wt.append(w)
            nleft -= 1
        return Ring(self.characteristic, names, degs, order, wt)

    def describe(self) -> str:
        """A readable summary of the ring, one fact per line."""
        lines = [
            f"characteristic           : {self.characteristic}",
            f"number of variables      : {self.nvars}",
        ]
        symm = [(i, b) for i, b in enumerate(self._blocks) if b.kind is BlockKind.SYMM]
        if len(symm) == 1:
            lines.append("variables                : " + "".join(self.varnames))
            lines.append("weights                  : " + "".join(f"{d} " for d in self.degrees))
        else:
            for i, b in symm:
                lines.append(f"{b.nvars:>2} variables for block {i} : " + "".join(b.varnames))
            for i, b in symm:
                lines.append(f"weights for block {i}      : " + "".join(f"{d} " for d in b.weights))
        for i, b in enumerate(self._blocks):
            if b.kind is BlockKind.WTFCN:
                lines.append(f"weight vector block {i}    : " + "".join(f"{d} " for d in b.weights))
        order = []
        for b in self._blocks:
            if b.kind is BlockKind.COMP:
                order.append("c ")
            elif b.kind is BlockKind.WTFCN:
                order.append("w ")
            else:
                order.append(f"{b.nvars} ")
        lines.append("monomial order           : " + "".join(order))
        if self.comp_loc == -1:
            lines.append("maximum number of rows in any matrix is : 1")
        return "\n".join(lines) + "\n"

    @staticmethod
    def from_degrees(
        degrees: Sequence[int],
        varnames: Sequence[str],
        characteristic: int = DEFAULT_CHARACTERISTIC,
    ) -> "Ring":
        """A ring with one block of variables and a component, its weights
        shifted so that the smallest is at least 1."""
        degs = [int(d) for d in degrees]
        lo, _ = degree_range(degs)
        shift = -lo + 1 if lo <= 0 else 0
        return Ring(
            characteristic,
            varnames,
            [d + shift for d in degs],
            [len(degs), BlockKind.COMP],
            [],
        )