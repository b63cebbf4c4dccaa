"""Take-home summary — composites income tax and employee CPF."""

from decimal import Decimal

from sgtax.calculators.amounts import ZERO, round_currency, round_rate, to_decimal
from sgtax.calculators.cpf import compute_cpf_summary
from sgtax.calculators.income_tax import calculate_net_tax, compute_tax
from sgtax.models import ComprehensiveSummary, TaxSummary


def compose_summary(
    annual_income: Decimal | float | int | None,
    is_resident_eligible: bool = True,
) -> ComprehensiveSummary:
    """Combine income tax and CPF into final take-home pay.

    Tax and CPF are computed independently from the same income. Employer
    CPF is reported but is not a deduction from the employee's pay.

    Args:
        annual_income: Gross annual income. Non-positive income carries
            through unchanged with no tax or CPF.
        is_resident_eligible: Whether CPF applies (citizen/PR, full rates).

    Returns:
        ComprehensiveSummary with whole-dollar take-home and deductions and
        the take-home rate to one decimal place.
    """
    income = to_decimal(annual_income)
    tax = compute_tax(income)
    cpf = compute_cpf_summary(income, is_resident_eligible)

    net_tax = calculate_net_tax(income)
    employee_cpf = Decimal(cpf.employee_contribution)
    final_take_home = income - net_tax - employee_cpf
    total_deductions = net_tax + employee_cpf
    take_home_rate = final_take_home / income * 100 if income > 0 else ZERO

    return ComprehensiveSummary(
        annual_income=float(income),
        is_resident_eligible=is_resident_eligible,
        tax=TaxSummary(
            gross_tax=tax.gross_tax,
            rebate=tax.rebate,
            net_tax=tax.net_tax,
            average_tax_rate=tax.average_tax_rate,
            marginal_tax_rate=tax.marginal_tax_rate,
        ),
        cpf=cpf,
        final_take_home=round_currency(final_take_home),
        total_deductions=round_currency(total_deductions),
        effective_take_home_rate=round_rate(take_home_rate),
    )
