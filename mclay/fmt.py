"""A small printf-style formatter with the conversions the system uses."""

from __future__ import annotations

import sys

_DIGITS = "0123456789ABCDEF"
_ULONG = 1 << 64
_BASES = {"d": 10, "o": 8, "x": 16}


def to_base(n: int, base: int) -> str:
    """Write ``n`` in ``base`` with upper-case digits.

    Negative numbers carry a minus sign only in base 10; in other bases they
    are written as their 64-bit unsigned equivalent.
    """
    if not 2 <= base <= 16:
        raise ValueError(f"base must be between 2 and 16, not {base}")
    if n < 0 and base == 10:
        return "-" + to_base(-n, 10)
    value = n % _ULONG
    digits = []
    while True:
        value, rem = divmod(value, base)
        digits.append(_DIGITS[rem])
        if value == 0:
            break
    return "".join(reversed(digits))


def _is_digit(c: str) -> bool:
    return "0" <= c <= "9"


def format_message(fmt: str, *args) -> str:
    """Expand ``fmt`` using %c, %d, %o, %x, %ld and %s, with optional width and '-'.

    Any other conversion character stands for itself, so "%%" gives "%".
    """
    values = iter(args)

    def next_arg():
        try:
            return next(values)
        except StopIteration:
            raise ValueError(f"not enough arguments for format {fmt!r}") from None

    out: list[str] = []
    pos = 0
    end = len(fmt)
    while pos < end:
        pct = fmt.find("%", pos)
        if pct < 0:
            out.append(fmt[pos:])
            break
        out.append(fmt[pos:pct])
        pos = pct + 1
        if pos >= end:
            out.append("%")
            break
        left = fmt[pos] == "-"
        if left:
            pos += 1
        width = 0
        while pos < end and _is_digit(fmt[pos]):
            width = 10 * width + int(fmt[pos])
            pos += 1
        conv = fmt[pos] if pos < end else ""
        pos += 1

        if conv == "c":
            piece = chr(int(next_arg()) & 0x7F)
        elif conv in _BASES:
            piece = to_base(int(next_arg()), _BASES[conv])
        elif conv == "l":
            piece = to_base(int(next_arg()), 10)
            pos += 1  # the conversion letter after 'l'
        elif conv == "s":
            piece = str(next_arg())
        elif conv == "r":
            sys.stderr.write("internal warning: 'r' used in printing -- a no no\n")
            piece = ""
        else:
            piece = conv

        out.append(piece.ljust(width) if left else piece.rjust(width))
    return "".join(out)