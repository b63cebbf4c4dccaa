"""Pydantic models for calculator results."""

from typing import Literal

from pydantic import BaseModel

# --- Tax ---


class TaxResult(BaseModel):
    """Income tax payable on an annual income. Amounts are unrounded."""

    model_config = {"frozen": True}

    annual_income: float
    gross_tax: float
    rebate: float
    net_tax: float
    after_tax_income: float
    average_tax_rate: float  # percent
    marginal_tax_rate: float  # percent


class TaxSummary(BaseModel):
    """Tax fields carried into a comprehensive summary."""

    model_config = {"frozen": True}

    gross_tax: float
    rebate: float
    net_tax: float
    average_tax_rate: float
    marginal_tax_rate: float


# --- CPF ---


class CPFResult(BaseModel):
    """Mandatory CPF contributions, each rounded to whole dollars."""

    model_config = {"frozen": True}

    total_contribution: int
    employee_contribution: int
    employer_contribution: int
    cpf_subject_income: int
    exempt_income: int
    calculation_method: Literal["simple", "advanced"] = "simple"
    assumptions: list[str] = []


class MonthlyBreakdown(BaseModel):
    """Annual CPF contributions spread evenly over 12 months."""

    model_config = {"frozen": True}

    employee_contribution: int
    employer_contribution: int
    total_contribution: int


class CPFSummary(CPFResult):
    """CPF result with a per-month view."""

    monthly_breakdown: MonthlyBreakdown


# --- Combined ---


class ComprehensiveSummary(BaseModel):
    """Tax and employee CPF combined into take-home pay."""

    model_config = {"frozen": True}

    annual_income: float
    is_resident_eligible: bool
    tax: TaxSummary
    cpf: CPFSummary
    final_take_home: int
    total_deductions: int
    effective_take_home_rate: float  # percent, one decimal


class BracketInfo(BaseModel):
    """A tax bracket as exposed over the API."""

    lower: float
    upper: float | None
    rate: float
    base_amount: float


class BracketTable(BaseModel):
    """The resident bracket table and rebate parameters."""

    brackets: list[BracketInfo]
    rebate_rate: float
    rebate_cap: float
