"""Matrices as lists of column vectors with row and column degrees."""

from __future__ import annotations

from .poly import Poly, PolyRing


def degree_range(degrees) -> tuple[int, int]:
    """Lowest and highest of ``degrees``; (0, 0) when there are none."""
    values = list(degrees)
    if not values:
        return 0, 0
    return min(values), max(values)


class Matrix:
    """A graded matrix: row degrees, column polynomials and column degrees."""

    def __init__(self, ring: PolyRing, degrees=(), gens=(), deggens=None) -> None:
        self.ring = ring
        self.degrees: list[int] = [int(d) for d in degrees]
        self.gens: list[Poly] = []
        self.deggens: list[int] = []
        column_degrees = list(deggens) if deggens is not None else []
        for i, f in enumerate(gens):
            self.append(f, column_degrees[i] if i < len(column_degrees) else None)

    def __repr__(self) -> str:
        return f"Matrix(degrees={self.degrees!r}, gens={self.gens!r}, deggens={self.deggens!r})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return (
            self.ring is other.ring
            and self.degrees == other.degrees
            and self.gens == other.gens
            and self.deggens == other.deggens
        )

    def append(self, f: Poly | None, degree: int | None = None) -> None:
        """Add a column; its degree is computed from the entries when not given."""
        if f is None:
            f = self.ring.zero()
        self.gens.append(f)
        self.deggens.append(self.degree_of(f) if degree is None else int(degree))

    def nrows(self) -> int:
        return len(self.degrees)

    def ncols(self) -> int:
        return len(self.gens)

    def copy(self) -> "Matrix":
        return Matrix(self.ring, self.degrees, self.gens, self.deggens)

    def degree_of(self, f: Poly | None) -> int:
        """Degree of the leading term of ``f`` plus the degree of its row."""
        if f is None or f.is_zero():
            return 0
        lead = f.leading()
        if not 1 <= lead.comp <= len(self.degrees):
            raise IndexError(f"row {lead.comp} is outside a matrix with {len(self.degrees)} rows")
        return self.ring.degree(lead.exps) + self.degrees[lead.comp - 1]