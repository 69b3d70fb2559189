"""Ring maps: substitutions of polynomials for the variables of a ring."""

from __future__ import annotations

from .matrix import Matrix
from .poly import Poly, PolyRing
from .polyparse import parse_poly
from .printing import format_poly
from .varnames import VariableError, parse_var


def _names(source) -> tuple[str, ...]:
    if isinstance(source, PolyRing):
        return tuple(source.varnames)
    return tuple(source)


class RingMap:
    """A map from a ring with variables ``source`` to the ring ``target``,
    taking the i-th source variable to the i-th image; missing images are zero."""

    def __init__(
        self,
        source,
        target: PolyRing,
        images=(),
        source_label: str = "R",
        target_label: str = "S",
    ) -> None:
        self.source_names = _names(source)
        self.target = target
        self.source_label = source_label
        self.target_label = target_label
        self.images: list[Poly | None] = [self._coerce(f) for f in images]

    def __repr__(self) -> str:
        return f"RingMap({self.source_names!r}, {self.target!r}, {self.images!r})"

    def _coerce(self, f) -> Poly | None:
        if f is None:
            return None
        if isinstance(f, str):
            return parse_poly(self.target, f, 1)
        if not isinstance(f, Poly) or f.ring is not self.target:
            raise ValueError("images must be polynomials over the target ring")
        return f

    def apply_term(self, exps, coef: int, comp: int) -> Poly:
        """The image of the term ``coef * x^exps`` in row ``comp``."""
        target = self.target
        exps = tuple(int(e) for e in exps)
        if len(exps) != len(self.source_names):
            raise ValueError(f"monomial {exps!r} does not have {len(self.source_names)} exponents")
        zero = target.zero()
        top = min(len(self.images), len(exps))
        if any(exps[top:]):
            return zero
        rcoef = target.normalize(coef)
        rpoly = target.unit(comp)
        rexp = [0] * target.nvars
        for i in range(top):
            a = exps[i]
            if a == 0:
                continue
            g = self.images[i]
            if g is None or g.is_zero():
                return zero
            if len(g) == 1:
                lead = g.leading()
                rcoef = target.normalize(rcoef * pow(lead.coef, a, target.characteristic))
                rexp = [r + a * e for r, e in zip(rexp, lead.exps)]
            else:
                for _ in range(a):
                    rpoly = g * rpoly
            if rcoef == 0 or rpoly.is_zero():
                return zero
        return rpoly.scaled_shift(rcoef, rexp)

    def apply(self, f: Poly | None) -> Poly:
        """The image of a polynomial vector over the source ring."""
        result = self.target.zero()
        if f is None:
            return result
        if f.ring.nvars != len(self.source_names):
            raise ValueError("polynomial is not over the source ring of this map")
        for term in f:
            result = result + self.apply_term(term.exps, term.coef, term.comp)
        return result

    def apply_matrix(self, matrix: Matrix) -> Matrix:
        """The matrix whose columns are the images of those of ``matrix``."""
        result = Matrix(self.target, degrees=matrix.degrees)
        for column in matrix.gens:
            result.append(self.apply(column))
        return result

    def set_image(self, name: str, f) -> None:
        """Send the source variable ``name`` to ``f`` (a Poly, text, or None for zero)."""
        index, _ = parse_var(name, self.source_names)
        if index is None:
            raise VariableError(f"variable {name} not defined")
        image = self._coerce(f)
        while len(self.images) <= index:
            self.images.append(None)
        self.images[index] = image

    def describe(self) -> str:
        """One line naming the map, then one line per source variable."""
        lines = [f"map : {self.source_label} ---> {self.target_label}"]
        for i, name in enumerate(self.source_names):
            image = self.images[i] if i < len(self.images) else None
            lines.append(f"{name} |--> {format_poly(self.target, image, 1)}")
        return "\n".join(lines) + "\n"


def identity_map(source_names, target: PolyRing, ones: bool = False) -> RingMap:
    """Send each source variable to the target variable of the same name;
    the others go to 1 if ``ones`` is true, else to 0."""
    images: list[Poly | None] = []
    for name in _names(source_names):
        index, _ = parse_var(name, target.varnames)
        if index is None:
            images.append(target.unit(1) if ones else None)
        else:
            images.append(target.var(index, 1))
    return RingMap(source_names, target, images)