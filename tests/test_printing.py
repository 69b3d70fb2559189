import pytest

from mclay.matrix import Matrix
from mclay.poly import Poly, PolyRing, Term
from mclay.printing import format_matrix, format_poly


@pytest.fixture
def ring():
    return PolyRing("xyz")


def test_zero_prints_as_zero(ring):
    assert format_poly(ring, ring.zero(), 1) == "0"
    assert format_poly(ring, None, 1) == "0"


def test_other_component_prints_zero(ring):
    assert format_poly(ring, ring.var(0, 1), 2) == "0"


def test_single_variable(ring):
    assert format_poly(ring, ring.var(1, 1), 1) == "y"


def test_constants(ring):
    assert format_poly(ring, ring.constant(1, 1), 1) == "1"
    assert format_poly(ring, ring.constant(-1, 1), 1) == "-1"
    assert format_poly(ring, ring.constant(12, 1), 1) == "12"


def test_power_and_product(ring):
    x, y = ring.var(0, 1), ring.var(1, 1)
    assert format_poly(ring, x * x, 1) == "x^2"
    assert format_poly(ring, ring.constant(2, 1) * x * y, 1) == "2*x*y"


def test_negative_variable(ring):
    assert format_poly(ring, -ring.var(0, 1), 1) == "-x"


def test_fraction_coefficient(ring):
    half = ring.reciprocal(2)
    f = Poly(ring, [Term(half, (0, 0, 0), 1)])
    assert format_poly(ring, f, 1) == "1/2"


def test_line_breaks_follow_maxterms(ring):
    x, y, z = (ring.var(i, 1) for i in range(3))
    f = x + y + z + ring.constant(1, 1)
    wrapped = format_poly(ring, f, 1, 2)
    plain = format_poly(ring, f, 1, 100)
    assert wrapped.count("\n  ") == len(f) // 2
    assert wrapped.replace("\n  ", "") == plain


def test_bad_maxterms(ring):
    with pytest.raises(ValueError):
        format_poly(ring, ring.var(0, 1), 1, 0)


def test_format_single_entry_matrix(ring):
    m = Matrix(ring, degrees=[0], gens=[ring.var(0, 1)])
    assert format_matrix(ring, m) == "{\n  {x}\n}\n"


def test_format_matrix_structure(ring):
    x, y = ring.var(0, 1), ring.var(1, 2)
    m = Matrix(ring, degrees=[0, 0], gens=[x, y])
    text = format_matrix(ring, m)
    assert text.startswith("{\n  {")
    assert text.endswith("}\n}\n")
    first, second = text[2:-3].split("},\n")
    assert first == "  {" + format_poly(ring, x, 1) + ",\n    " + format_poly(ring, y, 1)
    assert second == "  {" + format_poly(ring, x, 2) + ",\n    " + format_poly(ring, y, 2) + "}"