"""Hometown-tax estimation engine.

Runs the full pipeline for one taxpayer:
  - Taxable income and income tax (basic deduction 480,000 yen)
  - Taxable income and resident tax income levy (basic deduction 430,000 yen)
  - Donation limit from the 20% cap on the resident-tax special credit
  - Income tax and resident tax savings at the limit
  - Optional savings for caller-chosen donation amounts
"""

import logging
from collections.abc import Iterable

from furusato.engines.deductions import (
    business_filing_deduction,
    dependent_deduction,
    earned_income_deduction,
    medical_deduction,
    spouse_deduction_amount,
    taxable_income_for_income_tax,
    taxable_income_for_resident_tax,
    total_income,
)
from furusato.engines.donation import (
    donation_ceilings,
    donation_effects,
    income_tax_saving,
    limit_crosses_bracket,
    resident_tax_saving,
)
from furusato.engines.income_tax import baseline_income_tax_rate, income_tax
from furusato.engines.resident_tax import resident_tax
from furusato.engines.rules import DEFAULT_RULES, TaxRules
from furusato.models.reports import FurusatoEstimate
from furusato.models.taxpayer import TaxpayerInput

logger = logging.getLogger(__name__)


class FurusatoEstimator:
    """Estimates income tax, resident tax and the hometown-tax donation limit."""

    def __init__(self, rules: TaxRules = DEFAULT_RULES) -> None:
        self.rules = rules
        self.warnings: list[str] = []

    def _warn(self, message: str) -> None:
        logger.warning(message)
        self.warnings.append(message)

    def estimate(
        self, taxpayer: TaxpayerInput, amounts: Iterable[int] = ()
    ) -> FurusatoEstimate:
        """Compute the full estimate.

        ``amounts`` are extra donation scenarios reported in ``effects``;
        the limit itself is always evaluated.
        """
        self.warnings = []
        rules = self.rules

        method = taxpayer.declaration_method
        if not taxpayer.has_recognized_method:
            self._warn(
                f"Unrecognized declaration method {method.raw!r}. "
                f"No blue-return deduction applied."
            )

        # --- Income tax ---
        it_taxable = taxable_income_for_income_tax(taxpayer, rules)
        it_amount = income_tax(taxpayer, rules=rules)

        # --- Resident tax ---
        rt_taxable = taxable_income_for_resident_tax(taxpayer, rules)
        rt_amount = resident_tax(taxpayer, suppress_donation=True, rules=rules)

        # --- Donation limit and its effect ---
        ceilings = donation_ceilings(taxpayer, rules)
        limit = ceilings.resident_special
        if ceilings.binding < limit:
            self._warn(
                f"Donation limit ¥{limit:,} exceeds another statutory ceiling "
                f"(¥{ceilings.binding:,}); donations above it are not fully deducted."
            )
        if limit_crosses_bracket(taxpayer, limit, rules):
            self._warn(
                f"A donation of ¥{limit:,} moves taxable income into a lower income tax "
                f"bracket; the limit assumes the "
                f"{baseline_income_tax_rate(taxpayer, rules):.0%} rate and is approximate."
            )

        return FurusatoEstimate(
            taxpayer=taxpayer,
            earned_income_deduction=earned_income_deduction(taxpayer.salary_income, rules),
            total_income=total_income(taxpayer, rules),
            medical_deduction=medical_deduction(taxpayer, rules),
            filing_deduction=business_filing_deduction(
                method, taxpayer.business_income, rules
            ),
            dependent_deduction=dependent_deduction(taxpayer.dependent_count, rules),
            spouse_deduction=spouse_deduction_amount(taxpayer.spouse_deduction, rules),
            taxable_income_for_income_tax=it_taxable,
            income_tax_rate=baseline_income_tax_rate(taxpayer, rules),
            income_tax=it_amount,
            resident_tax_rate=rules.resident_tax_rate,
            taxable_income_for_resident_tax=rt_taxable,
            resident_tax=rt_amount,
            donation_limit=limit,
            income_tax_saving=income_tax_saving(taxpayer, limit, rules),
            resident_tax_saving=resident_tax_saving(taxpayer, limit, rules),
            ceilings=ceilings,
            effects=donation_effects(taxpayer, amounts, rules),
            warnings=list(self.warnings),
        )
