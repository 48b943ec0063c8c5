"""Data models for the FreeOnes scraper."""

import math
from dataclasses import dataclass
from typing import Any, Union

Number = Union[int, float]

# Partial scrape result: output key -> value. Empty dict = nothing found.
PartialResult = dict[str, Any]


def format_number(value: Number) -> str:
    """Render a number the way it appears on the profile page ('NaN' for junk)."""
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
    return str(value)


@dataclass(frozen=True)
class Measurements:
    """Bust/cup/waist/hip parsed from a '34DD-26-36' style string."""

    bust: Number
    cup: str
    waist: Number
    hip: Number

    def bra_size(self) -> str:
        return f"{format_number(self.bust)}{self.cup}"

    def __str__(self) -> str:
        return f"{self.bra_size()}-{format_number(self.waist)}-{format_number(self.hip)}"
