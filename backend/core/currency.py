"""Parsing and formatting of BRL amounts, percentages and durations."""

from __future__ import annotations

import re
from typing import Union

from core.projection import NEVER_YEARS

Number = Union[int, float]

_CURRENCY_NOISE = re.compile(r"[R$\s.]")
_PERCENT_NOISE = re.compile(r"[%\s]")
# leading decimal number only; no exponent, underscores, inf or nan
_NUMBER_PREFIX = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)")


def _to_float(text: str) -> float:
    """Read the numeric prefix of text ("12abc" -> 12.0); no prefix gives 0.0."""
    match = _NUMBER_PREFIX.match(text)
    return float(match.group(0)) if match else 0.0


def parse_currency(value: Union[str, Number, None]) -> float:
    """
    Turn a pt-BR money string ("R$ 1.234,56") into a float.

    Dots are grouping separators and the comma is the decimal mark.
    Anything unparseable becomes 0.0 instead of raising.
    """
    if value is None:
        return 0.0
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)

    clean = _CURRENCY_NOISE.sub("", str(value)).replace(",", ".", 1)
    return _to_float(clean) if clean else 0.0


def parse_percentage(value: Union[str, Number, None]) -> float:
    """Parse "1.5", "1,5" or "1,5%" into 1.5; unparseable input gives 0.0."""
    if value is None:
        return 0.0
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)

    clean = _PERCENT_NOISE.sub("", str(value)).replace(",", ".", 1)
    return _to_float(clean) if clean else 0.0


def format_currency(value: float) -> str:
    # 1,234,567.89 -> 1.234.567,89
    body = f"{abs(value):,.2f}".replace(",", "_").replace(".", ",").replace("_", ".")
    sign = "-" if value < 0 else ""
    return f"{sign}R$ {body}"


def format_duration(years: int, months: int) -> str:
    # plural forms for every count, as the results card always rendered them
    if years == NEVER_YEARS and months == 0:
        return "Nunca"
    return f"{years} anos {months} meses"
