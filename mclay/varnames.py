"""Ring variable names: single letters, indexed letters and |quoted| names."""

from __future__ import annotations

import itertools
import warnings
from dataclasses import dataclass

from .intparse import ParseError, eat_int

_MAX_INDICES = 9


class VariableError(ValueError):
    """Raised when text does not hold the expected variable names."""


@dataclass(frozen=True)
class _Indet:
    head: str  # a letter, or "" for a bare index list
    indices: tuple[int, ...] | None  # None for a |quoted| name


def _is_alpha(c: str) -> bool:
    return c.isascii() and c.isalpha()


def is_var_start(c: str) -> bool:
    """True if ``c`` can begin a variable name."""
    return len(c) == 1 and (c in "|[" or _is_alpha(c))


def _index_name(head: str, indices: tuple[int, ...]) -> str:
    if not indices:
        return head
    return f"{head}[{','.join(str(i) for i in indices)}]"


def _collect(text: str, pos: int) -> tuple[_Indet, str, int] | None:
    if pos >= len(text) or not is_var_start(text[pos]):
        return None
    if text[pos] == "|":
        close = text.find("|", pos + 1)
        end = len(text) if close < 0 else close + 1
        return _Indet("", None), text[pos:end], end

    head = ""
    if _is_alpha(text[pos]):
        head = text[pos]
        pos += 1
    indices: list[int] = []
    if pos < len(text) and text[pos] == "[":
        while True:
            pos += 1
            if len(indices) == _MAX_INDICES:
                raise VariableError(f"at most {_MAX_INDICES} indices are allowed")
            try:
                value, used = eat_int(text[pos:])
            except ParseError as exc:
                raise VariableError(f"bad index in {text!r}: {exc}") from exc
            indices.append(value)
            pos += used
            if pos >= len(text) or text[pos] != ",":
                break
        if pos >= len(text) or text[pos] != "]":
            raise VariableError(f"missing ']' in {text!r}")
        pos += 1
    indet = _Indet(head, tuple(indices))
    return indet, _index_name(head, indet.indices), pos


def collect_var(text: str) -> tuple[str, int]:
    """Read the variable at the start of ``text``.

    Returns its canonical name (index expressions evaluated) and the
    position just after it.
    """
    found = _collect(text, 0)
    if found is None:
        raise VariableError(f"no variable at the start of {text!r}")
    _, name, end = found
    return name, end


def find_var(names, name: str) -> int | None:
    """Position of ``name`` in ``names``, or None."""
    for index, candidate in enumerate(names):
        if candidate == name:
            return index
    return None


def parse_var(text: str, names) -> tuple[int | None, int]:
    """Read a variable from the start of ``text`` and locate it in ``names``.

    Returns the index (None if it is not among ``names``) and the position
    after the variable.
    """
    name, end = collect_var(text)
    return find_var(names, name), end


def _add(names: list[str], name: str) -> None:
    if name in names:
        raise VariableError(f"can't define variable {name} twice")
    names.append(name)


def _compatible(first: _Indet, last: _Indet) -> bool:
    if first.indices is None or last.indices is None:
        return False
    if len(first.indices) != len(last.indices):
        return False
    a, b = first.head, last.head
    if not a and not b:
        return True
    return (a.islower() and b.islower()) or (a.isupper() and b.isupper())


def _span(a: int, b: int) -> range:
    step = -1 if a > b else 1
    return range(a, b + step, step)


def _extend_sequence(names: list[str], first: _Indet, last: _Indet, count: int) -> None:
    if not _compatible(first, last):
        raise VariableError("non-compatible variables can't be sequenced")
    heads = _span(ord(first.head) if first.head else 0, ord(last.head) if last.head else 0)
    axes = [heads] + [_span(a, b) for a, b in zip(first.indices, last.indices)]
    for combo in itertools.product(*axes):
        head = chr(combo[0]) if combo[0] else ""
        _add(names, _index_name(head, tuple(combo[1:])))
        if len(names) == count:
            return


def generate_vars(text: str, count: int) -> list[str]:
    """Produce ``count`` distinct variable names from ``text``.

    Names may follow one another directly or be separated by blanks, and
    ``first-last`` generates a whole sequence, e.g. ``a-e`` or ``x[1]-y[3]``.
    Text left over once ``count`` names exist is ignored with a warning.
    """
    names: list[str] = []
    pos = 0
    while len(names) < count:
        while pos < len(text) and text[pos].isspace():
            pos += 1
        if pos >= len(text):
            remaining = count - len(names)
            raise VariableError(f"{remaining} more variable(s) needed")
        found = _collect(text, pos)
        if found is None:
            raise VariableError(f"not a variable: {text[pos:]!r}")
        first, name, pos = found
        if pos < len(text) and text[pos] == "-":
            pos += 1
            ending = _collect(text, pos)
            if ending is None:
                raise VariableError(f"sequence has no last variable: {text!r}")
            last, _, pos = ending
            _extend_sequence(names, first, last, count)
        else:
            _add(names, name)
    rest = text[pos:].strip()
    if rest:
        warnings.warn(f"too many variables given, ignoring {rest}", stacklevel=2)
    return names