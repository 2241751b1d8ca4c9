# utils/currency.py
import math
import re
from decimal import Decimal, ROUND_HALF_UP
from typing import Union

import numpy as np

Number = Union[float, int]

# Leading decimal number, the way a browser's parseFloat reads it ("12abc" -> 12)
_LEADING_NUMBER = re.compile(r'^\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?')

# Position between digits that has a multiple of three digits to its right
_THOUSANDS_BOUNDARY = re.compile(r'\B(?=(\d{3})+(?!\d))')


# ----------------------------------------------------------------------
# Input side
# ----------------------------------------------------------------------

def parse_amount(raw) -> float:
    """
    Cleans a grouped amount string (e.g., "25,000.50") into a float (25000.5).
    Anything that does not start with a finite number comes back as 0.0.
    """
    if raw is None:
        return 0.0
    if isinstance(raw, (int, float)):
        value = float(raw)
        return value if math.isfinite(value) else 0.0

    match = _LEADING_NUMBER.match(str(raw).replace(',', ''))
    if not match:
        return 0.0

    value = float(match.group(0))
    return value if math.isfinite(value) else 0.0


def format_amount_for_display(raw) -> str:
    """
    Input mask for the investment amount text box.

    Keeps digits and a single decimal point, then regroups the integer part
    with commas: "25000" -> "25,000", "1.2.3" -> "1.23".
    """
    if raw is None:
        return ""
    if isinstance(raw, float) and raw.is_integer():
        raw = int(raw)

    cleaned = re.sub(r'[^0-9.]', '', str(raw))
    whole, dot, fraction = cleaned.partition('.')
    fraction = fraction.replace('.', '')

    return _THOUSANDS_BOUNDARY.sub(',', whole) + dot + fraction


# ----------------------------------------------------------------------
# Output side
# ----------------------------------------------------------------------

def _finite_or_zero(val) -> float:
    if val is None:
        return 0.0
    val = float(val)
    return val if np.isfinite(val) else 0.0


def round_half_up(val: Number) -> int:
    """Nearest integer with .5 going up, so 2.5 -> 3 and -2.5 -> -2."""
    return int(math.floor(val + 0.5))


def round_half_away(val: Number, decimals: int = 0) -> Decimal:
    """
    Rounds the shortest decimal form of val with ties away from zero, the way
    browser number formatting does: 2.5 -> 3, 0.125 -> 0.13, -2.5 -> -3.
    """
    return Decimal(repr(float(val))).quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP)


def _grouped(val: Number, decimals: int) -> str:
    return f"{round_half_away(val, decimals):,.{decimals}f}"


def format_currency_output(val) -> str:
    """
    Formats a dollar amount: cents for anything under a dollar, whole dollars
    otherwise ($0.42, $6,250). Negative amounts read -$1,234.
    """
    val = _finite_or_zero(val)
    decimals = 2 if abs(val) < 1 else 0
    text = _grouped(abs(val), decimals)
    # -0.001 rounds to 0.00, which should not carry a sign
    if val < 0 and text.strip('0.,') != '':
        return f"-${text}"
    return f"${text}"


def format_token_count(val) -> str:
    """Whole tokens, comma grouped."""
    text = _grouped(_finite_or_zero(val), 0)
    return "0" if text == "-0" else text


def format_roi_percent(val) -> str:
    return f"{round_half_up(_finite_or_zero(val))}%"


def format_tier_price(price: Number) -> str:
    return f"${price:.3f}"
