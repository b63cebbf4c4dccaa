"""CPF contribution calculator — annual estimate with OW and annual wage ceilings.

Works from a single annual figure, assuming 80% of it is paid as a steady
monthly Ordinary Wage and 20% as a year-end Additional Wage. Only the
full-rate class (Singapore citizens and third-year-plus PRs aged 55 and
below) is modelled; anyone else contributes nothing here.
"""

import logging
from decimal import Decimal

from sgtax.calculators.amounts import ZERO, round_currency, to_decimal
from sgtax.calculators.tax_data import CPF_RATES, MONTHS_PER_YEAR
from sgtax.models import CPFResult, CPFSummary, MonthlyBreakdown

logger = logging.getLogger(__name__)

_ADVANCED_THRESHOLD = Decimal("0.9")

_BASE_ASSUMPTIONS = [
    "Employed for the full calendar year",
    "Employee aged 55 or below at full contribution rates",
]


def estimate_monthly_wage(annual_income: Decimal) -> Decimal:
    """Monthly Ordinary Wage implied by the 80/20 regular/bonus split."""
    return annual_income * CPF_RATES.regular_wage_share / MONTHS_PER_YEAR


def _empty_result() -> CPFResult:
    return CPFResult(
        total_contribution=0,
        employee_contribution=0,
        employer_contribution=0,
        cpf_subject_income=0,
        exempt_income=0,
    )


def _build_result(
    cpf_subject_income: Decimal,
    exempt_income: Decimal,
    assumptions: list[str],
) -> CPFResult:
    return CPFResult(
        total_contribution=round_currency(cpf_subject_income * CPF_RATES.total_rate),
        employee_contribution=round_currency(cpf_subject_income * CPF_RATES.employee_rate),
        employer_contribution=round_currency(cpf_subject_income * CPF_RATES.employer_rate),
        cpf_subject_income=round_currency(cpf_subject_income),
        exempt_income=round_currency(exempt_income),
        assumptions=assumptions,
    )


def _within_ceiling(annual_income: Decimal) -> CPFResult:
    """Monthly wage under the OW ceiling: only the annual ceiling applies."""
    cpf_subject_income = min(annual_income, CPF_RATES.annual_ceiling)
    exempt_income = max(ZERO, annual_income - CPF_RATES.annual_ceiling)
    return _build_result(
        cpf_subject_income,
        exempt_income,
        [*_BASE_ASSUMPTIONS, "Monthly wage averaged evenly across the year"],
    )


def _above_ceiling(annual_income: Decimal, monthly_wage: Decimal) -> CPFResult:
    """Monthly wage over the OW ceiling: OW is capped, AW fills the rest of the annual ceiling."""
    annual_ow = min(monthly_wage * MONTHS_PER_YEAR, CPF_RATES.ow_monthly_ceiling * MONTHS_PER_YEAR)
    aw_ceiling = CPF_RATES.annual_ceiling - annual_ow
    actual_aw = annual_income - annual_ow
    cpf_subject_aw = max(ZERO, min(actual_aw, aw_ceiling))

    cpf_subject_income = annual_ow + cpf_subject_aw
    exempt_income = annual_income - cpf_subject_income
    return _build_result(
        cpf_subject_income,
        exempt_income,
        [
            "80% of income paid as monthly salary, 20% as year-end bonus",
            *_BASE_ASSUMPTIONS,
            f"Monthly salary exceeds the ${CPF_RATES.ow_monthly_ceiling:,} Ordinary Wage ceiling",
        ],
    )


def compute_cpf(
    annual_income: Decimal | float | int | None,
    is_resident_eligible: bool = True,
) -> CPFResult:
    """Calculate annual CPF contributions.

    Args:
        annual_income: Gross annual income including bonus.
        is_resident_eligible: Whether the employee is in the full-rate
            citizen/PR class. Ineligible employees contribute nothing.

    Returns:
        CPFResult with total, employee and employer contributions and the
        split between CPF-subject and exempt income.
    """
    income = to_decimal(annual_income)
    if income <= 0 or not is_resident_eligible:
        return _empty_result()

    monthly_wage = estimate_monthly_wage(income)
    if monthly_wage <= CPF_RATES.ow_monthly_ceiling:
        logger.debug("CPF: monthly wage %.2f within OW ceiling", monthly_wage)
        return _within_ceiling(income)

    logger.debug("CPF: monthly wage %.2f above OW ceiling", monthly_wage)
    return _above_ceiling(income, monthly_wage)


def compute_cpf_summary(
    annual_income: Decimal | float | int | None,
    is_resident_eligible: bool = True,
) -> CPFSummary:
    """CPF result plus the same contributions spread over 12 months."""
    result = compute_cpf(annual_income, is_resident_eligible)
    monthly = MonthlyBreakdown(
        employee_contribution=round_currency(Decimal(result.employee_contribution) / MONTHS_PER_YEAR),
        employer_contribution=round_currency(Decimal(result.employer_contribution) / MONTHS_PER_YEAR),
        total_contribution=round_currency(Decimal(result.total_contribution) / MONTHS_PER_YEAR),
    )
    return CPFSummary(**result.model_dump(), monthly_breakdown=monthly)


def take_home_before_tax(
    annual_income: Decimal | float | int | None,
    is_resident_eligible: bool = True,
) -> Decimal:
    """Annual income less the employee's CPF share."""
    income = to_decimal(annual_income)
    result = compute_cpf(income, is_resident_eligible)
    return income - result.employee_contribution


def should_use_advanced_calculation(annual_income: Decimal | float | int | None) -> bool:
    """True when the estimated monthly wage is within 10% of (or over) the OW ceiling.

    Near the ceiling the month-by-month timing of salary and bonus starts to
    matter, so the annual estimate is less reliable.
    """
    income = to_decimal(annual_income)
    return estimate_monthly_wage(income) > CPF_RATES.ow_monthly_ceiling * _ADVANCED_THRESHOLD
