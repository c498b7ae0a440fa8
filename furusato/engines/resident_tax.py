"""Resident tax income levy (住民税所得割), per-capita levy excluded.

Unlike income tax, a donation is credited against the tax itself: a basic
credit at the resident tax rate and a special credit covering the remainder
of the donation above 2,000 yen not already returned by income tax.
https://www.city.yokohama.lg.jp/kurashi/koseki-zei-hoken/zeikin/y-shizei/kojin-shiminzei-kenminzei/kojin-shiminzei-shosai/zeigakukoujo.html
"""

import logging
from decimal import Decimal

from furusato.engines.deductions import taxable_income
from furusato.engines.income_tax import baseline_income_tax_rate
from furusato.engines.rules import DEFAULT_RULES, TaxRules, truncate
from furusato.models.taxpayer import TaxpayerInput

logger = logging.getLogger(__name__)


def special_deduction_rate(
    taxpayer: TaxpayerInput, rules: TaxRules = DEFAULT_RULES
) -> Decimal:
    """Share of a donation returned by the special credit (特例分).

    1 - resident rate - income tax rate * (1 + surtax), where the income tax
    rate is the marginal rate before any donation.
    """
    income_rate = baseline_income_tax_rate(taxpayer, rules)
    return (
        1
        - rules.resident_tax_rate
        - income_rate * (1 + rules.reconstruction_surtax_rate)
    )


def resident_tax(
    taxpayer: TaxpayerInput,
    donation: int | None = None,
    *,
    suppress_donation: bool = False,
    rules: TaxRules = DEFAULT_RULES,
) -> int:
    """Resident tax income levy, truncated to 100 yen.

    ``suppress_donation`` computes the baseline on the same taxable income
    even when a donation amount is passed.
    """
    # 課税標準額は1,000円未満切捨て
    taxable = truncate(
        taxable_income(taxpayer, rules.resident_tax_basic_deduction, rules),
        rules.taxable_income_unit,
    )
    tax = int(taxable * rules.resident_tax_rate) - rules.adjustment_deduction

    credit = 0 if suppress_donation else rules.creditable_donation(donation)
    if credit:
        basic_credit = int(credit * rules.resident_tax_rate)
        special_credit = int(credit * special_deduction_rate(taxpayer, rules))
        logger.debug(
            "resident tax donation credits: basic=%d special=%d",
            basic_credit, special_credit,
        )
        tax -= basic_credit + special_credit

    return truncate(tax, rules.tax_amount_unit)
