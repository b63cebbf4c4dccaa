"""API routes for the Singapore tax and CPF calculator."""

import logging

from fastapi import APIRouter

from config.settings import settings
from sgtax.calculators import compose_summary, compute_cpf_summary, compute_tax
from sgtax.calculators.amounts import parse_income
from sgtax.calculators.tax_data import REBATE_CAP, REBATE_RATE, TAX_BRACKETS
from sgtax.models import (
    BracketInfo,
    BracketTable,
    ComprehensiveSummary,
    CPFSummary,
    TaxResult,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _resident(resident: bool | None) -> bool:
    return settings.default_resident_eligible if resident is None else resident


@router.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok"}


@router.get("/tax", response_model=TaxResult)
async def tax(income: str | None = None) -> TaxResult:
    """Income tax for an annual income. Unparseable income is treated as 0."""
    return compute_tax(parse_income(income))


@router.get("/cpf", response_model=CPFSummary)
async def cpf(income: str | None = None, resident: bool | None = None) -> CPFSummary:
    """CPF contributions with a monthly breakdown."""
    return compute_cpf_summary(parse_income(income), _resident(resident))


@router.get("/summary", response_model=ComprehensiveSummary)
async def summary(income: str | None = None, resident: bool | None = None) -> ComprehensiveSummary:
    """Tax, CPF and take-home pay in one response.

    Mirrors the shareable `?income=` link: the same query always gives the
    same figures.
    """
    annual_income = parse_income(income)
    logger.info("Summary requested for income=%s resident=%s", annual_income, resident)
    return compose_summary(annual_income, _resident(resident))


@router.get("/brackets", response_model=BracketTable)
async def brackets() -> BracketTable:
    """The resident tax bracket table and rebate parameters."""
    return BracketTable(
        brackets=[
            BracketInfo(
                lower=float(b.lower),
                upper=float(b.upper) if b.upper is not None else None,
                rate=float(b.rate),
                base_amount=float(b.base_amount),
            )
            for b in TAX_BRACKETS
        ],
        rebate_rate=float(REBATE_RATE),
        rebate_cap=float(REBATE_CAP),
    )
