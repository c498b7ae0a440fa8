"""Income deductions and taxable income.

Each deduction is a pure function of the taxpayer input. ``taxable_income``
combines them with a basic deduction supplied by the caller, because income
tax (480,000 yen) and resident tax (430,000 yen) use different basic
deductions on the same income.
"""

import logging

from furusato.engines.rules import DEFAULT_RULES, TaxRules
from furusato.models.enums import DeclarationMethod
from furusato.models.taxpayer import TaxpayerInput, UnrecognizedMethod

logger = logging.getLogger(__name__)


def earned_income_deduction(salary: int, rules: TaxRules = DEFAULT_RULES) -> int:
    """給与所得控除額 from the published band schedule."""
    for upper, rate, intercept in rules.earned_income_bands:
        if upper is None or salary <= upper:
            return int(salary * rate) + intercept
    raise ValueError(f"No earned income band covers salary {salary}")


def total_income(taxpayer: TaxpayerInput, rules: TaxRules = DEFAULT_RULES) -> int:
    """総所得金額: salary less its deduction, plus miscellaneous and business income.

    Not floored; a salary below the earned-income deduction reduces other income.
    """
    return (
        taxpayer.salary_income
        - earned_income_deduction(taxpayer.salary_income, rules)
        + taxpayer.miscellaneous_income
        + taxpayer.business_income
    )


def medical_deduction(taxpayer: TaxpayerInput, rules: TaxRules = DEFAULT_RULES) -> int:
    """医療費控除: expenses above the lesser of 5% of total income or 100,000 yen."""
    threshold = int(min(
        total_income(taxpayer, rules) * rules.medical_threshold_rate,
        rules.medical_threshold_cap,
    ))
    return max(taxpayer.medical_expenses - threshold, 0)


def business_filing_deduction(
    method: DeclarationMethod | UnrecognizedMethod,
    business_income: int,
    rules: TaxRules = DEFAULT_RULES,
) -> int:
    """青色申告特別控除, never more than the business income it offsets.

    An unrecognized method gets no deduction and the computation continues;
    callers at the boundary report it (see FurusatoEstimator).
    """
    if isinstance(method, UnrecognizedMethod):
        logger.debug("unrecognized declaration method %r: filing deduction 0", method.raw)
        return 0
    return min(rules.filing_deductions.get(method, 0), business_income)


def dependent_deduction(count: int, rules: TaxRules = DEFAULT_RULES) -> int:
    # TODO: specified dependents (特定扶養親族, 19-22) and elderly dependents get larger amounts
    return count * rules.dependent_deduction


def spouse_deduction_amount(flag: bool, rules: TaxRules = DEFAULT_RULES) -> int:
    return rules.spouse_deduction if flag else 0


def taxable_income(
    taxpayer: TaxpayerInput,
    basic_deduction: int,
    rules: TaxRules = DEFAULT_RULES,
) -> int:
    """課税所得: total income less every deduction, floored at 0.

    The result is not yet truncated to 1,000 yen; each tax applies its own
    truncation after any donation adjustment.
    """
    taxable = (
        total_income(taxpayer, rules)
        - medical_deduction(taxpayer, rules)
        - business_filing_deduction(
            taxpayer.declaration_method, taxpayer.business_income, rules
        )
        - taxpayer.social_insurance
        - dependent_deduction(taxpayer.dependent_count, rules)
        - spouse_deduction_amount(taxpayer.spouse_deduction, rules)
        - basic_deduction
    )
    return max(taxable, 0)


def taxable_income_for_income_tax(
    taxpayer: TaxpayerInput, rules: TaxRules = DEFAULT_RULES
) -> int:
    return taxable_income(taxpayer, rules.income_tax_basic_deduction, rules)


def taxable_income_for_resident_tax(
    taxpayer: TaxpayerInput, rules: TaxRules = DEFAULT_RULES
) -> int:
    return taxable_income(taxpayer, rules.resident_tax_basic_deduction, rules)
