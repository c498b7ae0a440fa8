"""National income tax (所得税), reconstruction surtax included.

A donation is deducted from taxable income (寄附金控除), not from the tax,
so it is applied before the 1,000 yen truncation and before the bracket
lookup.
https://www.nta.go.jp/publication/pamph/koho/kurashi/html/04_3.htm
"""

import logging
from decimal import Decimal

from furusato.engines.deductions import taxable_income
from furusato.engines.rules import DEFAULT_RULES, TaxRules, truncate
from furusato.models.taxpayer import TaxpayerInput

logger = logging.getLogger(__name__)


def rate_for(taxable: int, rules: TaxRules = DEFAULT_RULES) -> tuple[Decimal, int]:
    """Marginal rate and quick-calculation subtraction for a taxable income.

    Upper bounds are inclusive: 1,949,000 yen is taxed at 5%.
    """
    for upper, rate, subtraction in rules.income_tax_brackets:
        if upper is None or taxable <= upper:
            return rate, subtraction
    raise ValueError(f"No income tax bracket covers taxable income {taxable}")


def baseline_income_tax_rate(
    taxpayer: TaxpayerInput, rules: TaxRules = DEFAULT_RULES
) -> Decimal:
    """Marginal income tax rate with no donation applied."""
    rate, _ = rate_for(
        taxable_income(taxpayer, rules.income_tax_basic_deduction, rules), rules
    )
    return rate


def income_tax(
    taxpayer: TaxpayerInput,
    donation: int | None = None,
    rules: TaxRules = DEFAULT_RULES,
) -> int:
    """Income tax plus reconstruction surtax, truncated to 100 yen."""
    taxable = taxable_income(taxpayer, rules.income_tax_basic_deduction, rules)

    credit = rules.creditable_donation(donation)
    if credit:
        taxable -= credit

    # 課税所得金額は1,000円未満切捨て
    taxable = truncate(taxable, rules.taxable_income_unit)

    rate, subtraction = rate_for(taxable, rules)
    tax = int(taxable * rate) - subtraction
    if tax <= 0:
        return 0

    tax += int(tax * rules.reconstruction_surtax_rate)
    logger.debug(
        "income tax: taxable=%d rate=%s donation=%s tax=%d",
        taxable, rate, donation, tax,
    )
    # 申告納税額は100円未満切捨て
    return truncate(tax, rules.tax_amount_unit)
