"""Print a Singapore tax, CPF and take-home summary for an annual income.

Usage:
    python scripts/calculate.py 85000
    python scripts/calculate.py "$150,000" --json
    python scripts/calculate.py 120000 --non-resident
"""

import argparse
import json
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from config.settings import settings
from sgtax.calculators import compose_summary
from sgtax.calculators.amounts import parse_income
from sgtax.calculators.cpf import should_use_advanced_calculation
from sgtax.calculators.tax_data import CPF_RATES
from sgtax.models import ComprehensiveSummary

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Estimate Singapore income tax and CPF")
    parser.add_argument("income", help="Gross annual income, e.g. 85000 or '$85,000'")
    residency = parser.add_mutually_exclusive_group()
    residency.add_argument(
        "--resident",
        dest="resident",
        action="store_true",
        default=None,
        help="Citizen/PR at full CPF rates",
    )
    residency.add_argument(
        "--non-resident",
        dest="resident",
        action="store_false",
        help="Not CPF-eligible (no CPF contributions)",
    )
    parser.add_argument("--json", action="store_true", help="Print the summary as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")
    return parser.parse_args(argv)


def format_summary(summary: ComprehensiveSummary) -> str:
    """Render a summary as aligned plain-text lines."""
    tax = summary.tax
    cpf = summary.cpf
    rows = [
        ("Annual income", f"${summary.annual_income:,.0f}"),
        ("Gross tax", f"${tax.gross_tax:,.2f}"),
        ("Tax rebate", f"-${tax.rebate:,.2f}"),
        ("Net tax", f"${tax.net_tax:,.2f}"),
        ("Average tax rate", f"{tax.average_tax_rate:.1f}%"),
        ("Marginal tax rate", f"{tax.marginal_tax_rate:.1f}%"),
        ("CPF-subject income", f"${cpf.cpf_subject_income:,}"),
        (f"CPF employee ({CPF_RATES.employee_rate:.0%})", f"${cpf.employee_contribution:,}"),
        (f"CPF employer ({CPF_RATES.employer_rate:.0%})", f"${cpf.employer_contribution:,}"),
        ("CPF monthly (employee)", f"${cpf.monthly_breakdown.employee_contribution:,}"),
        ("Total deductions", f"${summary.total_deductions:,}"),
        ("Take-home pay", f"${summary.final_take_home:,}"),
        ("Take-home rate", f"{summary.effective_take_home_rate:.1f}%"),
    ]
    width = max(len(label) for label, _ in rows)
    lines = [f"{label:<{width}}  {value}" for label, value in rows]
    lines.extend(f"  * {note}" for note in cpf.assumptions)
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level_number,
        format="%(levelname)s: %(message)s",
    )

    income = parse_income(args.income)
    resident = settings.default_resident_eligible if args.resident is None else args.resident
    summary = compose_summary(income, resident)

    if args.json:
        print(json.dumps(summary.model_dump(), indent=2))
        return

    print(format_summary(summary))
    if resident and should_use_advanced_calculation(income):
        logger.warning(
            "Monthly salary is near or above the CPF Ordinary Wage ceiling; "
            "actual contributions depend on how salary and bonus are paid."
        )


if __name__ == "__main__":
    main()
