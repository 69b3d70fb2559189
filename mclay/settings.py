"""Named integer settings that control output, timing and computation."""

from __future__ import annotations

from dataclasses import dataclass


class SettingError(LookupError):
    """Raised when a setting name does not match any known setting."""


@dataclass(frozen=True)
class _Spec:
    name: str
    default: int
    description: str


_SPECS: tuple[_Spec, ...] = (
    _Spec("abort", 0, ">0 means exit when out of memory (increments on each failure)"),
    _Spec("auto", 0, ">0 means do NOT do autoreduction"),
    _Spec("autocalc", -1, "=0 no autocalc, <0 calc until done, >0 calc to autodegree"),
    _Spec("autodegree", 0, "if autocalc>0, this is highest degree to compute"),
    _Spec("char0", 0, ">0 means do NOT (try to) lift to rationals"),
    _Spec("echo", 0, ">0 tells Macaulay to echo all input"),
    _Spec("iodelay", 0, "delay (in system ticks) for caching verbose output"),
    _Spec("linesize", 79, "size of line for matrix display"),
    _Spec("maxdegree", 512, "maximum degree for monomials in rings created using 'ring'"),
    _Spec("nlines", 1, "number of blank lines between commands"),
    _Spec("prcomment", 0, "if >0 start each output line with ;"),
    _Spec("prlevel", 0, ">0 means suppress ALL output, except error messages"),
    _Spec("showmem", 1, ">0 means report memory usage at each increase"),
    _Spec("showpairs", 0, ">0 means report S-pairs left during computations"),
    _Spec("timer", 0, ">0 means display execution time"),
    _Spec("verbose", 0, ">0 means give verbose output"),
)


class Settings:
    """The table of set variables, addressed by name or by any prefix of a name.

    Names are kept in alphabetical order; a prefix selects the first name
    it begins.
    """

    def __init__(self) -> None:
        self._defaults = {spec.name: spec.default for spec in _SPECS}
        self._values: dict[str, int] = {}
        self.reset()

    def reset(self) -> None:
        """Put every setting back to its default value."""
        self._values = dict(self._defaults)

    def lookup(self, name: str) -> str:
        """Return the full name of the setting that ``name`` abbreviates."""
        if name:
            for spec in _SPECS:
                if spec.name.startswith(name):
                    return spec.name
        raise SettingError(f"no set variable named {name}")

    def get(self, name: str) -> int:
        return self._values[self.lookup(name)]

    def set(self, name: str, value: int) -> int:
        key = self.lookup(name)
        self._values[key] = int(value)
        return self._values[key]

    def increment(self, name: str, amount: int) -> int:
        key = self.lookup(name)
        self._values[key] += int(amount)
        return self._values[key]

    def restore_default(self, name: str) -> int:
        key = self.lookup(name)
        self._values[key] = self._defaults[key]
        return self._values[key]

    def describe(self) -> list[str]:
        """One line per setting: name, current value and what it means."""
        return [
            f"{spec.name:<10} {self._values[spec.name]:>3}    {spec.description}"
            for spec in _SPECS
        ]