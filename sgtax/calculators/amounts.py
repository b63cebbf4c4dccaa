"""Income coercion and rounding shared by the calculators."""

import logging
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

logger = logging.getLogger(__name__)

ZERO = Decimal("0")

_ONE_DECIMAL = Decimal("0.1")

# Amounts must stay finite as floats and within the decimal context.
MAX_INCOME_EXPONENT = 300


def _is_usable(value: Decimal) -> bool:
    return value.is_finite() and (value.is_zero() or value.adjusted() <= MAX_INCOME_EXPONENT)


def to_decimal(value: Decimal | float | int | None) -> Decimal:
    """Coerce an income value to Decimal.

    None, NaN, infinities and magnitudes of 1e301 or more become 0 so that
    the calculators stay total.
    Floats go through str() to avoid binary noise (0.1 -> 0.1, not 0.1000000000000000055...).
    """
    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value))
        except (InvalidOperation, ValueError):
            return ZERO
    if not _is_usable(result):
        return ZERO
    return result


def parse_income(text: str | None) -> Decimal:
    """Parse user-supplied income text, substituting 0 for anything unusable.

    Accepts thousands separators and a leading "$" ("$85,000" -> 85000).
    Non-positive values are returned as 0.
    """
    if text is None:
        return ZERO
    cleaned = text.strip().replace(",", "").replace("_", "").lstrip("$").strip()
    if not cleaned:
        return ZERO
    try:
        value = Decimal(cleaned)
    except InvalidOperation:
        logger.info("Ignoring unparseable income %r", text[:40])
        return ZERO
    if not _is_usable(value) or value <= 0:
        return ZERO
    return value


def round_currency(amount: Decimal) -> int:
    """Round to the nearest whole currency unit, halves away from zero."""
    return int(amount.to_integral_value(rounding=ROUND_HALF_UP))


def round_rate(rate: Decimal) -> float:
    """Round a percentage to one decimal place."""
    return float(rate.quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP))
