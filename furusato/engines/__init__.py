"""Tax computation engines."""

from furusato.engines.donation import (
    donation_ceilings,
    donation_effect,
    donation_effects,
    donation_limit,
    income_tax_saving,
    resident_tax_saving,
)
from furusato.engines.estimator import FurusatoEstimator
from furusato.engines.income_tax import income_tax, rate_for
from furusato.engines.resident_tax import resident_tax
from furusato.engines.rules import DEFAULT_RULES, TaxRules, rules_for_region

__all__ = [
    "DEFAULT_RULES",
    "FurusatoEstimator",
    "TaxRules",
    "donation_ceilings",
    "donation_effect",
    "donation_effects",
    "donation_limit",
    "income_tax",
    "income_tax_saving",
    "rate_for",
    "resident_tax",
    "resident_tax_saving",
    "rules_for_region",
]
