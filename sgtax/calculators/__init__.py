"""Pure income tax, CPF and take-home calculators."""

from sgtax.calculators.cpf import compute_cpf, compute_cpf_summary
from sgtax.calculators.income_tax import compute_tax
from sgtax.calculators.summary import compose_summary

__all__ = ["compose_summary", "compute_cpf", "compute_cpf_summary", "compute_tax"]
