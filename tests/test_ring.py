import pytest

from mclay.poly import DEFAULT_CHARACTERISTIC
from mclay.ring import (
    BlockKind,
    Ring,
    RingError,
    choose_characteristic,
    normalize_weight_vector,
    positive_weights,
    validate_monomial_order,
)


def test_choose_characteristic_big_prime_table():
    assert choose_characteristic(-1) == 32749
    assert choose_characteristic(-20) == 32561


@pytest.mark.parametrize("n", [2, 7, 97, 101, 32003])
def test_choose_characteristic_keeps_accepted(n):
    assert choose_characteristic(n) == n


@pytest.mark.parametrize("n", [4, 0, -21, 100])
def test_choose_characteristic_falls_back(n):
    with pytest.warns(UserWarning):
        assert choose_characteristic(n) == DEFAULT_CHARACTERISTIC


def test_validate_order_completes():
    order = validate_monomial_order([2, "c"], 3, True)
    assert order == [2, BlockKind.COMP, 1]


def test_validate_order_adds_component():
    assert validate_monomial_order([], 2, True) == [2, BlockKind.COMP]
    assert validate_monomial_order([], 2, False) == [2]


def test_validate_order_weight_entry():
    order = validate_monomial_order(["w", 2], 2, False)
    assert order == [BlockKind.WTFCN, 2]


@pytest.mark.parametrize("entries", [["c", "c"], [-1], [0], [2, 2]])
def test_validate_order_errors(entries):
    with pytest.raises(RingError):
        validate_monomial_order(entries, 3, True)


def test_normalize_weight_vector_nonnegative():
    degrees = [1, 2, 3]
    weights = [-5, 1, -7]
    result = normalize_weight_vector(weights, degrees)
    assert min(result) >= 0
    diffs = [r - w for r, w in zip(result, weights)]
    k = diffs[0] // degrees[0]
    assert diffs == [k * d for d in degrees]


def test_normalize_weight_vector_unchanged():
    assert normalize_weight_vector([0, 3], [1, 1]) == [0, 3]


def test_normalize_weight_vector_length():
    with pytest.raises(RingError):
        normalize_weight_vector([1], [1, 1])


def test_positive_weights_shift():
    result = positive_weights([-1, 2, 0], 512)
    assert min(result) == 1
    assert [b - a for a, b in zip(result, result[1:])] == [3, -2]


def test_positive_weights_caps():
    with pytest.warns(UserWarning):
        result = positive_weights([1, 600], 512)
    assert result == [1, 512]


def test_positive_weights_empty():
    with pytest.raises(RingError):
        positive_weights([], 512)


def test_from_degrees():
    r = Ring.from_degrees([0, 2], ["x", "y"])
    assert min(r.degrees) == 1
    assert r.degrees[1] - r.degrees[0] == 2
    assert [b.kind for b in r.blocks()] == [BlockKind.SYMM, BlockKind.COMP]
    assert r.comp_loc == 1
    assert r.characteristic == DEFAULT_CHARACTERISTIC


def test_accessors():
    r = Ring(7, ["x", "y", "z"], [1, 2, 3], [3, "c"])
    assert r.var_name(1) == "y"
    assert r.var_name(3) is None
    assert r.weight(2) == 3
    assert r.weight(-1) == 0
    assert r.var_index("z") == 2
    assert r.var_index("w") is None
    assert r.var_index("+") is None


def test_blocks_split_variables():
    r = Ring(7, ["a", "b", "c"], [1, 1, 2], [1, 2, "w", "c"], [1, 0, 0])
    blocks = r.blocks()
    assert blocks[0].varnames == ("a",)
    assert blocks[1].varnames == ("b", "c")
    assert blocks[1].weights == (1, 2)
    assert blocks[2].kind is BlockKind.WTFCN
    assert blocks[2].weights == (1, 0, 0)
    assert r.comp_loc == 3


def test_bad_ring():
    with pytest.raises(RingError):
        Ring(7, ["x"], [1, 1], [2])
    with pytest.raises(RingError):
        Ring(7, ["x", "y"], [1, 1], ["w", 2], [1])


def test_sum():
    r = Ring(7, ["x", "y"], [1, 1], ["w", 2, "c"], [1, 2])
    s = Ring(7, ["z"], [3], ["w", 1, "c"], [5])
    t = r.sum(s)
    assert t.varnames == ("x", "y", "z")
    assert t.degrees == (1, 1, 3)
    assert t.monorder == (BlockKind.WTFCN, 2, BlockKind.WTFCN, 1, BlockKind.COMP)
    vectors = [b.weights for b in t.blocks() if b.kind is BlockKind.WTFCN]
    assert vectors == [(1, 2, 0), (0, 0, 5)]
    assert t.comp_loc == 4


def test_describe():
    r = Ring(7, ["x", "y"], [1, 2], [2])
    text = r.describe()
    assert "characteristic           : 7\n" in text
    assert "variables                : xy\n" in text
    assert "weights                  : 1 2 \n" in text
    assert "maximum number of rows in any matrix is : 1" in text


def test_describe_blocks():
    r = Ring(7, ["x", "y"], [1, 2], [1, 1, "c"])
    text = r.describe()
    assert " 1 variables for block 0 : x\n" in text
    assert "monomial order           : 1 1 c \n" in text
    assert "maximum number of rows" not in text