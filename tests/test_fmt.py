import pytest

from mclay.fmt import format_message, to_base


@pytest.mark.parametrize("base", [2, 8, 10, 16])
@pytest.mark.parametrize("value", [0, 1, 7, 255, 1000, 123456789])
def test_to_base_round_trip(base, value):
    assert int(to_base(value, base), base) == value


def test_to_base_negative_decimal_has_sign():
    assert to_base(-42, 10) == str(-42)


def test_to_base_negative_other_base_is_unsigned_64():
    assert int(to_base(-1, 16), 16) == 2**64 - 1
    assert not to_base(-1, 8).startswith("-")


def test_to_base_uses_upper_case():
    text = to_base(255, 16)
    assert text == text.upper()
    assert int(text, 16) == 255


def test_to_base_rejects_bad_base():
    with pytest.raises(ValueError):
        to_base(5, 17)


def test_plain_text_unchanged():
    assert format_message("plain text\n") == "plain text\n"


def test_decimal_conversion():
    assert format_message("value %d!", 42) == f"value {42}!"
    assert format_message("%d", -7) == str(-7)


def test_octal_and_hex_conversions():
    assert int(format_message("%o", 64), 8) == 64
    assert int(format_message("%x", 3054), 16) == 3054


def test_long_conversion_skips_letter():
    assert format_message("%ld seconds\n", 5) == "5 seconds\n"


def test_string_and_char():
    assert format_message("%s and %s", "a", "b") == "a and b"
    assert format_message("%c", ord("A")) == "A"
    assert format_message("%c", ord("A") + 128) == "A"


def test_right_and_left_padding():
    right = format_message("%5d", 42)
    assert len(right) == 5
    assert right.strip() == "42"
    assert right.endswith("42")
    left = format_message("%-6s|", "ab")
    assert left.startswith("ab")
    assert left.endswith("|")
    assert len(left) == 7


def test_width_never_truncates():
    assert format_message("%2s", "abcdef") == "abcdef"


def test_unknown_conversion_stands_for_itself():
    assert format_message("100%%") == "100%"
    assert format_message("trailing %") == "trailing %"


def test_missing_argument_raises():
    with pytest.raises(ValueError):
        format_message("%d and %d", 1)