"""Singapore tax and CPF constants — resident brackets, rebate, CPF ceilings.

Hardcoded Python constants (not DB-driven). Rates are for YA 2025 (income
earned in 2024) and the 2025 CPF schedule for employees aged 55 and below.
The bracket table is validated once at import.
"""

from decimal import Decimal
from typing import NamedTuple


class TaxBracket(NamedTuple):
    """A single resident income tax bracket."""

    lower: Decimal  # exclusive, except 0
    upper: Decimal | None  # inclusive; None = no cap
    rate: Decimal
    base_amount: Decimal  # tax payable on income up to `lower`


class CpfRates(NamedTuple):
    """CPF wage ceilings and contribution rates for one eligibility class."""

    ow_monthly_ceiling: Decimal
    annual_ceiling: Decimal  # OW + AW per calendar year
    employee_rate: Decimal
    employer_rate: Decimal
    total_rate: Decimal
    regular_wage_share: Decimal  # share of annual pay assumed to be monthly OW


# Source: IRAS individual income tax rates, YA 2024 onwards
TAX_BRACKETS: tuple[TaxBracket, ...] = (
    TaxBracket(Decimal("0"), Decimal("20000"), Decimal("0"), Decimal("0")),
    TaxBracket(Decimal("20000"), Decimal("30000"), Decimal("0.02"), Decimal("0")),
    TaxBracket(Decimal("30000"), Decimal("40000"), Decimal("0.035"), Decimal("200")),
    TaxBracket(Decimal("40000"), Decimal("80000"), Decimal("0.07"), Decimal("550")),
    TaxBracket(Decimal("80000"), Decimal("120000"), Decimal("0.115"), Decimal("3350")),
    TaxBracket(Decimal("120000"), Decimal("160000"), Decimal("0.15"), Decimal("7950")),
    TaxBracket(Decimal("160000"), Decimal("200000"), Decimal("0.18"), Decimal("13950")),
    TaxBracket(Decimal("200000"), Decimal("240000"), Decimal("0.19"), Decimal("21150")),
    TaxBracket(Decimal("240000"), Decimal("280000"), Decimal("0.195"), Decimal("28750")),
    TaxBracket(Decimal("280000"), Decimal("320000"), Decimal("0.20"), Decimal("36550")),
    TaxBracket(Decimal("320000"), Decimal("500000"), Decimal("0.22"), Decimal("44550")),
    TaxBracket(Decimal("500000"), Decimal("1000000"), Decimal("0.23"), Decimal("84150")),
    TaxBracket(Decimal("1000000"), None, Decimal("0.24"), Decimal("199150")),
)

# Personal income tax rebate, YA 2025
REBATE_RATE = Decimal("0.60")
REBATE_CAP = Decimal("200")

# Source: CPF Board contribution rates from 1 Jan 2025
CPF_RATES = CpfRates(
    ow_monthly_ceiling=Decimal("7400"),
    annual_ceiling=Decimal("102000"),
    employee_rate=Decimal("0.20"),
    employer_rate=Decimal("0.17"),
    total_rate=Decimal("0.37"),
    regular_wage_share=Decimal("0.8"),
)

MONTHS_PER_YEAR = 12


def validate_brackets(brackets: tuple[TaxBracket, ...]) -> None:
    """Check that a bracket table partitions [0, inf) with consistent base amounts.

    Raises:
        ValueError: If the table is empty, has gaps, overlaps or misplaced
            unbounded brackets, or a base amount that does not match the tax
            accumulated by the brackets below it.
    """
    if not brackets:
        raise ValueError("Bracket table is empty.")
    if brackets[0].lower != 0:
        raise ValueError(f"First bracket must start at 0, not {brackets[0].lower}.")
    if brackets[-1].upper is not None:
        raise ValueError("Last bracket must be unbounded.")

    expected_base = Decimal("0")
    for i, bracket in enumerate(brackets):
        if bracket.rate < 0:
            raise ValueError(f"Bracket {i} has a negative rate.")
        if bracket.base_amount != expected_base:
            raise ValueError(
                f"Bracket {i} base amount {bracket.base_amount} does not match "
                f"accumulated tax {expected_base} at {bracket.lower}."
            )
        if i == len(brackets) - 1:
            break
        if bracket.upper is None:
            raise ValueError(f"Bracket {i} is unbounded but is not the last bracket.")
        if bracket.upper <= bracket.lower:
            raise ValueError(f"Bracket {i} upper bound must exceed its lower bound.")
        if brackets[i + 1].lower != bracket.upper:
            raise ValueError(
                f"Bracket {i + 1} starts at {brackets[i + 1].lower}, "
                f"expected {bracket.upper}."
            )
        expected_base += (bracket.upper - bracket.lower) * bracket.rate


validate_brackets(TAX_BRACKETS)
