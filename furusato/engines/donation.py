"""Hometown-tax donation effects and limits (ふるさと納税).

Savings are differences between the no-donation baseline and the same
taxpayer with a donation applied. The limit is the closed-form solution of

    resident_tax * 20% = (X - 2,000) * (1 - resident_rate - income_rate * (1 + surtax))

for X, i.e. the largest donation whose special credit stays within 20% of
the resident tax income levy.
https://www.soumu.go.jp/main_sosiki/jichi_zeisei/czaisei/czaisei_seido/furusato/mechanism/deduction.html
"""

import logging
from collections.abc import Iterable

from furusato.engines.deductions import taxable_income, total_income
from furusato.engines.income_tax import baseline_income_tax_rate, income_tax, rate_for
from furusato.engines.resident_tax import resident_tax, special_deduction_rate
from furusato.engines.rules import DEFAULT_RULES, TaxRules, truncate
from furusato.exceptions import DonationLimitUndefinedError
from furusato.models.reports import DonationCeilings, DonationEffect
from furusato.models.taxpayer import TaxpayerInput

logger = logging.getLogger(__name__)


def income_tax_saving(
    taxpayer: TaxpayerInput, amount: int, rules: TaxRules = DEFAULT_RULES
) -> int:
    return income_tax(taxpayer, rules=rules) - income_tax(taxpayer, amount, rules=rules)


def resident_tax_saving(
    taxpayer: TaxpayerInput, amount: int, rules: TaxRules = DEFAULT_RULES
) -> int:
    baseline = resident_tax(taxpayer, amount, suppress_donation=True, rules=rules)
    return baseline - resident_tax(taxpayer, amount, rules=rules)


def donation_effect(
    taxpayer: TaxpayerInput, amount: int, rules: TaxRules = DEFAULT_RULES
) -> DonationEffect:
    return DonationEffect(
        amount=amount,
        income_tax_saving=income_tax_saving(taxpayer, amount, rules),
        resident_tax_saving=resident_tax_saving(taxpayer, amount, rules),
    )


def donation_effects(
    taxpayer: TaxpayerInput, amounts: Iterable[int], rules: TaxRules = DEFAULT_RULES
) -> list[DonationEffect]:
    """Evaluate several donation scenarios, in the order given."""
    return [donation_effect(taxpayer, amount, rules) for amount in amounts]


def donation_limit(taxpayer: TaxpayerInput, rules: TaxRules = DEFAULT_RULES) -> int:
    """Maximum donation fully offset by the resident-tax special credit.

    Assumes the donation leaves taxable income in the bracket that set the
    income tax rate; see ``limit_crosses_bracket``.

    Raises:
        DonationLimitUndefinedError: if the special deduction rate is not positive.
    """
    rate = special_deduction_rate(taxpayer, rules)
    if rate <= 0:
        raise DonationLimitUndefinedError(rate, baseline_income_tax_rate(taxpayer, rules))

    baseline = resident_tax(taxpayer, suppress_donation=True, rules=rules)
    limit = int(baseline * rules.special_deduction_cap_rate / rate) + rules.donation_self_burden
    logger.debug(
        "donation limit: resident_tax=%d special_rate=%s limit=%d", baseline, rate, limit
    )
    return limit


def donation_ceilings(
    taxpayer: TaxpayerInput, rules: TaxRules = DEFAULT_RULES
) -> DonationCeilings:
    """All three statutory ceilings; ``donation_limit`` is the special one."""
    income = max(total_income(taxpayer, rules), 0)
    income_rate = baseline_income_tax_rate(taxpayer, rules)
    by_income_tax = (
        int(income * rules.income_tax_donation_cap_rate / income_rate)
        + rules.donation_self_burden
    )
    by_resident_basic = (
        int(income * rules.resident_basic_donation_cap_rate / rules.resident_tax_rate)
        + rules.donation_self_burden
    )
    return DonationCeilings(
        income_tax=by_income_tax,
        resident_basic=by_resident_basic,
        resident_special=donation_limit(taxpayer, rules),
    )


def limit_crosses_bracket(
    taxpayer: TaxpayerInput, amount: int, rules: TaxRules = DEFAULT_RULES
) -> bool:
    """Whether donating ``amount`` moves income-tax taxable income to a lower bracket."""
    if rules.creditable_donation(amount) == 0:
        return False
    taxable = taxable_income(taxpayer, rules.income_tax_basic_deduction, rules)
    after = truncate(taxable - rules.creditable_donation(amount), rules.taxable_income_unit)
    after_rate, _ = rate_for(after, rules)
    return after_rate != baseline_income_tax_rate(taxpayer, rules)
