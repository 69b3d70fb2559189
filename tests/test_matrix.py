import pytest

from mclay.matrix import Matrix, degree_range
from mclay.poly import PolyRing


@pytest.fixture
def ring():
    return PolyRing("xyz", weights=(1, 2, 3))


def test_empty_matrix(ring):
    m = Matrix(ring)
    assert m.nrows() == 0
    assert m.ncols() == 0


def test_append_with_explicit_degree(ring):
    m = Matrix(ring, degrees=[0])
    m.append(ring.var(0, 1), 7)
    assert m.ncols() == 1
    assert m.deggens == [7]


def test_degree_of_adds_row_degree(ring):
    m = Matrix(ring, degrees=[0, 3])
    f = ring.var(0, 2) * ring.var(1, 2)
    lead = f.leading()
    assert m.degree_of(f) - m.degrees[1] == ring.degree(lead.exps)


def test_degree_of_zero(ring):
    m = Matrix(ring, degrees=[4])
    assert m.degree_of(ring.zero()) == 0
    assert m.degree_of(None) == 0


def test_append_computes_degree(ring):
    m = Matrix(ring, degrees=[2])
    f = ring.var(2, 1)
    m.append(f)
    assert m.deggens == [m.degree_of(f)]


def test_append_none_is_zero_column(ring):
    m = Matrix(ring, degrees=[1])
    m.append(None)
    assert m.gens[0].is_zero()
    assert m.deggens == [0]


def test_copy_is_equal_and_independent(ring):
    m = Matrix(ring, degrees=[0], gens=[ring.var(0, 1)])
    c = m.copy()
    assert c == m
    c.append(ring.var(1, 1))
    assert m.ncols() == 1
    assert c.ncols() == 2


def test_degree_of_row_out_of_range(ring):
    m = Matrix(ring, degrees=[0])
    with pytest.raises(IndexError):
        m.degree_of(ring.var(0, 2))


def test_degree_range():
    assert degree_range([]) == (0, 0)
    assert degree_range([3, -1, 5]) == (-1, 5)
    assert degree_range([4]) == (4, 4)