import pytest

from mclay.varnames import (
    VariableError,
    collect_var,
    find_var,
    generate_vars,
    is_var_start,
    parse_var,
)


@pytest.mark.parametrize("c, expected", [
    ("a", True), ("Z", True), ("|", True), ("[", True),
    ("1", False), ("-", False), (" ", False), ("", False),
])
def test_is_var_start(c, expected):
    assert is_var_start(c) is expected


def test_collect_single_letter():
    assert collect_var("x+y") == ("x", 1)


def test_collect_indexed():
    assert collect_var("a[1,2]rest") == ("a[1,2]", len("a[1,2]"))


def test_collect_bare_index_list():
    assert collect_var("[1,-2,3]") == ("[1,-2,3]", len("[1,-2,3]"))


def test_collect_evaluates_indices():
    name, _ = collect_var("a[1,2,3+(4*5)/2]")
    assert name == "a[1,2,13]"


def test_collect_quoted():
    assert collect_var("|foo|bar") == ("|foo|", len("|foo|"))


def test_collect_errors():
    with pytest.raises(VariableError):
        collect_var("1x")
    with pytest.raises(VariableError, match="missing"):
        collect_var("a[1,2")
    with pytest.raises(VariableError):
        collect_var("a[1,2,3,4,5,6,7,8,9,10]")


def test_find_var():
    assert find_var(["x", "y"], "y") == 1
    assert find_var(["x", "y"], "z") is None


def test_parse_var():
    assert parse_var("y*z", ["x", "y", "z"]) == (1, 1)
    assert parse_var("w", ["x"]) == (None, 1)


def test_sequence_with_indices():
    assert generate_vars("a[1]-b[3]", 6) == ["a[1]", "a[2]", "a[3]", "b[1]", "b[2]", "b[3]"]


def test_letter_sequence():
    assert generate_vars("a-e", 5) == list("abcde")


def test_sequence_stops_at_count():
    assert generate_vars("a-e", 3) == generate_vars("a-e", 5)[:3]


def test_descending_sequence():
    assert generate_vars("e-a", 5) == list(reversed(generate_vars("a-e", 5)))


def test_consecutive_and_separated_names():
    assert generate_vars("xyz", 3) == ["x", "y", "z"]
    assert generate_vars("x y |long|", 3) == ["x", "y", "|long|"]


def test_leftover_text_warns():
    with pytest.warns(UserWarning, match="ignoring"):
        names = generate_vars("xyzw", 3)
    assert names == ["x", "y", "z"]


def test_generated_names_round_trip():
    for name in generate_vars("a[1,1]-a[2,3]", 6):
        assert collect_var(name) == (name, len(name))


@pytest.mark.parametrize("text", ["xx", "a-B", "a[1]-b", "xy", "x1"])
def test_generate_errors(text):
    with pytest.raises(VariableError):
        generate_vars(text, 3)