# testimonials_api/api/params.py
"""
Normalization of raw query/path strings before they reach a service.
"""

import logging
import re
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 50
MAX_ID = 2**63 - 1
MAX_PAGE = MAX_ID // MAX_LIMIT

# Longer digit runs are out of range for every caller anyway
_MAX_DIGITS = 18
_OUT_OF_RANGE = 10**_MAX_DIGITS

_INT_PREFIX = re.compile(r"\s*([+-]?)(\d+)", re.ASCII)
_DECIMAL = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?", re.ASCII)
_RADIX = re.compile(r"0([xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)", re.ASCII)
_RADIX_BASES = {"x": 16, "o": 8, "b": 2}


@dataclass(frozen=True)
class PaginationOptions:
    page: int
    limit: int

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


def parse_int_prefix(value: Optional[str]) -> Optional[int]:
    """
    Parse the leading integer of a string ("12abc" -> 12, " 7" -> 7).

    Returns None when the string is absent or does not start with a number.
    Numbers longer than 18 digits come back as +/-10**18, which every caller
    clamps.
    """
    if value is None:
        return None
    m = _INT_PREFIX.match(value)
    if not m:
        return None
    sign = -1 if m.group(1) == "-" else 1
    digits = m.group(2).lstrip("0") or "0"
    if len(digits) > _MAX_DIGITS:
        return sign * _OUT_OF_RANGE
    return sign * int(digits)


def parse_pagination(page: Optional[str] = None, limit: Optional[str] = None) -> PaginationOptions:
    current_page = parse_int_prefix(page)
    current_limit = parse_int_prefix(limit)

    if current_page is None:
        current_page = DEFAULT_PAGE
    if current_limit is None:
        current_limit = DEFAULT_LIMIT

    if current_limit > MAX_LIMIT:
        logger.debug("Clamping requested limit %s to %s", current_limit, MAX_LIMIT)
        current_limit = MAX_LIMIT

    # Keeps OFFSET within a non-negative INTEGER
    current_page = min(max(current_page, 1), MAX_PAGE)
    current_limit = max(current_limit, 1)

    return PaginationOptions(page=current_page, limit=current_limit)


def parse_id(raw: str) -> Optional[int]:
    """
    Coerce a path id to an integer.

    Accepts ASCII decimal notation ("42", " 42 ", "7.0", "1e2"), unsigned
    0x/0o/0b literals, and the empty string (0). Anything else, including
    fractional values and numbers outside the INTEGER range, returns None,
    which services treat as not found.
    """
    value = raw.strip()
    if value == "":
        return 0

    m = _RADIX.fullmatch(value)
    if m:
        number = int(m.group(1)[1:], _RADIX_BASES[m.group(1)[0].lower()])
        return number if number <= MAX_ID else None

    if not _DECIMAL.fullmatch(value):
        return None

    try:
        number = Decimal(value)
    except ArithmeticError:
        # Exponent beyond what decimal can represent
        return None
    if not number.is_finite():
        return None
    if number.is_zero():
        return 0
    # Checked before any arithmetic so huge exponents never reach the context
    if number.adjusted() > _MAX_DIGITS:
        return None
    if number != number.to_integral_value():
        return None
    if number.copy_abs() > MAX_ID:
        return None
    return int(number)
