"""Invocation state resolved from the command line."""

from __future__ import annotations

from dataclasses import dataclass, replace
from functools import reduce
from typing import Iterable

from .errors import InternalError

#: Flag values recorded by the parser for ``-c``/``-f`` and their long forms.
CELSIUS_FLAG = "c"
FAHRENHEIT_FLAG = "f"


@dataclass(frozen=True)
class Invocation:
    """Everything one run needs: locale, unit choice and the raw operands."""

    measurement_locale: str
    locale_uses_fahrenheit: bool
    use_fahrenheit: bool
    temperature: str = ""
    humidity: str = ""

    def apply_flag(self, flag: str) -> Invocation:
        if flag == CELSIUS_FLAG:
            return replace(self, use_fahrenheit=False)
        if flag == FAHRENHEIT_FLAG:
            return replace(self, use_fahrenheit=True)
        raise InternalError(f"unexpected unit flag {flag!r}")


def fold_unit_flags(initial: Invocation, flags: Iterable[str]) -> Invocation:
    """Apply unit flags in command-line order; the last one wins."""
    return reduce(Invocation.apply_flag, flags, initial)
