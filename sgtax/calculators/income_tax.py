"""Income tax calculator — cumulative-base bracket lookup with the personal rebate."""

import logging
from decimal import Decimal

from sgtax.calculators.amounts import ZERO, to_decimal
from sgtax.calculators.tax_data import REBATE_CAP, REBATE_RATE, TAX_BRACKETS, TaxBracket
from sgtax.models import TaxResult

logger = logging.getLogger(__name__)

_HUNDRED = Decimal("100")


def find_bracket(annual_income: Decimal) -> TaxBracket:
    """Return the first bracket whose upper bound covers the income.

    Incomes past every bounded bracket fall into the last (unbounded) one.
    """
    for bracket in TAX_BRACKETS:
        if bracket.upper is None or annual_income <= bracket.upper:
            return bracket
    return TAX_BRACKETS[-1]


def calculate_gross_tax(annual_income: Decimal) -> Decimal:
    """Tax before rebate. Zero for non-positive income."""
    if annual_income <= 0:
        return ZERO
    bracket = find_bracket(annual_income)
    tax = bracket.base_amount + (annual_income - bracket.lower) * bracket.rate
    return max(ZERO, tax)


def calculate_rebate(gross_tax: Decimal) -> Decimal:
    """Personal income tax rebate: 60% of tax, capped at $200."""
    if gross_tax <= 0:
        return ZERO
    return min(gross_tax * REBATE_RATE, REBATE_CAP)


def calculate_net_tax(annual_income: Decimal) -> Decimal:
    """Tax payable after the rebate."""
    gross_tax = calculate_gross_tax(annual_income)
    return max(ZERO, gross_tax - calculate_rebate(gross_tax))


def compute_tax(annual_income: Decimal | float | int | None) -> TaxResult:
    """Calculate Singapore resident income tax for YA 2025.

    Args:
        annual_income: Gross annual income. None, non-finite or non-positive
            values give an all-zero result.

    Returns:
        TaxResult with gross tax, rebate, net tax, after-tax income and
        average/marginal rates in percent.
    """
    income = to_decimal(annual_income)
    if income <= 0:
        return TaxResult(
            annual_income=0.0,
            gross_tax=0.0,
            rebate=0.0,
            net_tax=0.0,
            after_tax_income=0.0,
            average_tax_rate=0.0,
            marginal_tax_rate=0.0,
        )

    bracket = find_bracket(income)
    gross_tax = calculate_gross_tax(income)
    rebate = calculate_rebate(gross_tax)
    net_tax = max(ZERO, gross_tax - rebate)
    after_tax_income = max(ZERO, income - net_tax)
    logger.debug("Income %s falls in bracket from %s at %s", income, bracket.lower, bracket.rate)

    return TaxResult(
        annual_income=float(income),
        gross_tax=float(gross_tax),
        rebate=float(rebate),
        net_tax=float(net_tax),
        after_tax_income=float(after_tax_income),
        average_tax_rate=float(net_tax / income * _HUNDRED),
        marginal_tax_rate=float(bracket.rate * _HUNDRED),
    )
