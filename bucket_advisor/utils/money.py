"""
Rupee formatting, amounts in words, and horizon labels for user-facing text.

Indian digit grouping puts the first comma after the last three digits and
every two digits after that::

    1000      -> "1,000"
    100000    -> "1,00,000"
    12345678  -> "1,23,45,678"

Fractions are kept to at most three digits with trailing zeros dropped.
Amounts in words use the lakh / crore scale::

    150000    -> "One Lakh Fifty Thousand Rupees"
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext

_ONES = (
    "", "One", "Two", "Three", "Four", "Five", "Six", "Seven", "Eight", "Nine",
    "Ten", "Eleven", "Twelve", "Thirteen", "Fourteen", "Fifteen", "Sixteen",
    "Seventeen", "Eighteen", "Nineteen",
)
_TENS = (
    "", "", "Twenty", "Thirty", "Forty", "Fifty", "Sixty", "Seventy", "Eighty", "Ninety",
)

# (unit size, singular, plural), largest first
_INDIAN_SCALE = (
    (10_000_000, "Crore", "Crores"),
    (100_000, "Lakh", "Lakhs"),
    (1_000, "Thousand", "Thousand"),
)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up (not banker's rounding)."""
    return math.floor(value + 0.5)


def format_inr(amount: float, max_fraction_digits: int = 3) -> str:
    """Format ``amount`` with Indian digit grouping (no currency symbol).

    Any finite float is accepted, however large. Infinite amounts render as
    ``"∞"`` / ``"-∞"`` and NaN as ``"NaN"``.

    Args:
        amount:              Value to format.
        max_fraction_digits: Fraction digits kept after half-up rounding;
                             trailing zeros are dropped. 0 gives whole rupees.
    """
    if math.isnan(amount):
        return "NaN"
    if math.isinf(amount):
        return "-∞" if amount < 0 else "∞"

    value = Decimal(str(amount))
    step = Decimal(1).scaleb(-max_fraction_digits)
    # The default 28-digit context cannot quantize very large amounts.
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + max_fraction_digits + 2)
        quantized = value.quantize(step, rounding=ROUND_HALF_UP)

    sign = "-" if quantized < 0 else ""
    whole, _, fraction = f"{abs(quantized):f}".partition(".")
    fraction = fraction.rstrip("0")

    if len(whole) > 3:
        head, tail = whole[:-3], whole[-3:]
        pairs: list[str] = []
        while len(head) > 2:
            pairs.insert(0, head[-2:])
            head = head[:-2]
        if head:
            pairs.insert(0, head)
        whole = ",".join(pairs + [tail])

    text = f"{whole}.{fraction}" if fraction else whole
    return f"{sign}{text}"


def format_rupees(amount: float, max_fraction_digits: int = 3) -> str:
    """Return ``format_inr`` output with the rupee sign, e.g. ``"₹1,00,000"``."""
    return f"₹{format_inr(amount, max_fraction_digits)}"


def amount_in_words(amount: float) -> str:
    """Spell out the whole-rupee part of ``amount`` on the lakh / crore scale.

    Paise are dropped (the amount is floored). Negative amounts are prefixed
    with ``"Minus"``.

    Raises:
        ValueError: If ``amount`` is infinite or NaN.
    """
    if not math.isfinite(amount):
        raise ValueError(f"Cannot spell out non-finite amount {amount!r}.")
    if amount < 0:
        return f"Minus {amount_in_words(-amount)}"
    rupees = math.floor(amount)
    if rupees == 0:
        return "Zero Rupees"
    return f"{_whole_number_words(rupees)} Rupees"


def _whole_number_words(n: int) -> str:
    for size, singular, plural in _INDIAN_SCALE:
        if n >= size:
            count, rest = divmod(n, size)
            head = f"One {singular}" if count == 1 else f"{_whole_number_words(count)} {plural}"
            return f"{head} {_whole_number_words(rest)}" if rest else head
    return _below_thousand_words(n)


def _below_thousand_words(n: int) -> str:
    if n < 20:
        return _ONES[n]
    if n < 100:
        tens, ones = divmod(n, 10)
        return f"{_TENS[tens]} {_ONES[ones]}" if ones else _TENS[tens]
    hundreds, rest = divmod(n, 100)
    words = f"{_ONES[hundreds]} Hundred"
    return f"{words} {_below_thousand_words(rest)}" if rest else words


def horizon_label(months: int) -> str:
    """Describe a horizon in whole years for explanation text.

    Months are converted to years with half-up rounding, so 6 months reads
    as "1 year" and 5 months as "less than a year".
    """
    years = round_half_up(months / 12)
    if years < 1:
        return "less than a year"
    if years == 1:
        return "1 year"
    return f"{years} years"


def duration_label(months: int) -> str:
    """Short duration for summaries: whole years from 12 months, else months."""
    if months >= 12:
        years = round_half_up(months / 12)
        return "1 year" if years == 1 else f"{years} years"
    return "1 month" if months == 1 else f"{months} months"
