"""
Size Units
Maps unit tokens to byte multipliers and parses free-form size expressions.

Examples:
    parse_size_expression("50MB")   # SizeExpression(50, SizeUnit.MB)
    parse_size_expression("MB50")   # same thing
    parse_size_expression("5M0B")   # same thing
    parse_size_expression("100")    # bare numbers are megabytes
"""

from enum import Enum
from typing import NamedTuple, Optional

_KB = 1000
_Kb = 125
_MB = _KB * _KB


class SizeUnit(Enum):
    B = 1
    Kb = _Kb
    KB = _KB
    Mb = _KB * _Kb
    MB = _MB
    Gb = _MB * _Kb
    GB = _MB * _KB

    @property
    def multiplier(self) -> int:
        return self.value


DEFAULT_MAGNITUDE = 10
DEFAULT_UNIT = SizeUnit.MB


class SizeExpression(NamedTuple):
    magnitude: int
    unit: SizeUnit = DEFAULT_UNIT

    @property
    def byte_count(self) -> int:
        return self.magnitude * self.unit.multiplier

    def __str__(self):
        return f"{self.magnitude}{self.unit.name}"


def lookup_unit(token: str) -> Optional[SizeUnit]:
    """Return the unit named exactly ``token`` (case-sensitive), or None."""
    return SizeUnit.__members__.get(token)


def parse_size_expression(token: str) -> SizeExpression:
    """
    Parse a size token such as '50MB' into a SizeExpression.

    Digits and non-digits are collected separately, so their interleaving
    does not matter. A missing number falls back to DEFAULT_MAGNITUDE and
    an unknown unit falls back to megabytes; parsing never fails.

    Args:
        token: Size token entered by the user

    Returns:
        SizeExpression with the parsed magnitude and unit
    """
    token = (token or "").strip()

    try:
        return SizeExpression(int(token), DEFAULT_UNIT)
    except ValueError:
        pass

    numeric = "".join(c for c in token if c.isdecimal())
    alphabetic = "".join(c for c in token if not c.isdecimal())

    unit = lookup_unit(alphabetic) or DEFAULT_UNIT
    try:
        magnitude = int(numeric)
    except ValueError:
        magnitude = DEFAULT_MAGNITUDE

    return SizeExpression(magnitude, unit)


def format_size(bytes_val: int) -> str:
    """Format a byte count with the largest fitting decimal unit."""
    size = float(bytes_val)
    for unit in ['B', 'KB', 'MB']:
        if size < 1000:
            return f"{int(size)}{unit}" if unit == 'B' else f"{size:.1f}{unit}"
        size /= 1000
    return f"{size:.1f}GB"
