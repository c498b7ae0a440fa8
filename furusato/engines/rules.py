"""Tax rule configuration.

Income tax and resident tax constants, the earned-income deduction schedule and
the progressive income tax table. Calculators receive a TaxRules instance;
never hardcode rates in computation functions.

Sources:
  - 給与所得控除: https://www.nta.go.jp/taxes/shiraberu/taxanswer/shotoku/1410.htm
  - 所得税の税率: https://www.nta.go.jp/taxes/shiraberu/taxanswer/shotoku/2260.htm
  - 端数計算: https://www.nta.go.jp/publication/pamph/koho/kurashi/html/01_1.htm
  - ふるさと納税の控除: https://www.soumu.go.jp/main_sosiki/jichi_zeisei/czaisei/czaisei_seido/furusato/mechanism/deduction.html
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, model_validator

from furusato.exceptions import ConfigurationError
from furusato.models.enums import DeclarationMethod

# ---------------------------------------------------------------------------
# Earned-income deduction (給与所得控除): (upper_bound, rate, intercept)
# deduction = floor(salary * rate) + intercept. Upper bound is inclusive,
# None for the top band.
# ---------------------------------------------------------------------------
EARNED_INCOME_DEDUCTION_BANDS: tuple[tuple[int | None, Decimal, int], ...] = (
    (1_625_000, Decimal("0"), 550_000),
    (1_800_000, Decimal("0.4"), -100_000),
    (3_600_000, Decimal("0.3"), 80_000),
    (6_600_000, Decimal("0.2"), 440_000),
    (8_500_000, Decimal("0.1"), 1_100_000),
    (None, Decimal("0"), 1_950_000),
)

# ---------------------------------------------------------------------------
# Income tax quick-calculation table (所得税の速算表): (upper_bound, rate, subtraction)
# tax = taxable * rate - subtraction. Upper bound is inclusive.
# ---------------------------------------------------------------------------
INCOME_TAX_BRACKETS: tuple[tuple[int | None, Decimal, int], ...] = (
    (1_949_000, Decimal("0.05"), 0),
    (3_299_999, Decimal("0.10"), 97_500),
    (6_949_999, Decimal("0.20"), 427_500),
    (8_999_999, Decimal("0.23"), 636_000),
    (17_999_999, Decimal("0.33"), 1_536_000),
    (39_999_999, Decimal("0.40"), 2_796_000),
    (None, Decimal("0.45"), 4_796_000),
)

# ---------------------------------------------------------------------------
# Blue-return special deduction (青色申告特別控除), capped at business income
# ---------------------------------------------------------------------------
FILING_DEDUCTIONS: dict[DeclarationMethod, int] = {
    DeclarationMethod.NONE: 0,
    DeclarationMethod.ELECTRONIC: 650_000,
    DeclarationMethod.PAPER: 550_000,
    DeclarationMethod.SIMPLE: 100_000,
}

# ---------------------------------------------------------------------------
# Resident tax rate (municipal 6% + prefectural 4%) by region.
# Kanagawa adds 0.025% to the prefectural rate (水源環境保全税).
# ---------------------------------------------------------------------------
REGIONAL_RESIDENT_TAX_RATES: dict[str, Decimal] = {
    "standard": Decimal("0.10"),
    "kanagawa": Decimal("0.10025"),
}


class TaxRules(BaseModel):
    """Immutable set of constants shared by every calculator."""

    model_config = ConfigDict(frozen=True)

    income_tax_basic_deduction: int = 480_000
    resident_tax_basic_deduction: int = 430_000
    resident_tax_rate: Decimal = REGIONAL_RESIDENT_TAX_RATES["standard"]
    reconstruction_surtax_rate: Decimal = Decimal("0.021")
    # 調整控除 is approximated by its minimum amount
    adjustment_deduction: int = 2_500

    dependent_deduction: int = 380_000
    spouse_deduction: int = 380_000
    medical_threshold_rate: Decimal = Decimal("0.05")
    medical_threshold_cap: int = 100_000
    filing_deductions: dict[DeclarationMethod, int] = FILING_DEDUCTIONS

    earned_income_bands: tuple[tuple[int | None, Decimal, int], ...] = (
        EARNED_INCOME_DEDUCTION_BANDS
    )
    income_tax_brackets: tuple[tuple[int | None, Decimal, int], ...] = INCOME_TAX_BRACKETS

    taxable_income_unit: int = 1_000
    tax_amount_unit: int = 100

    # Hometown-tax donation
    donation_self_burden: int = 2_000
    special_deduction_cap_rate: Decimal = Decimal("0.20")
    income_tax_donation_cap_rate: Decimal = Decimal("0.40")
    resident_basic_donation_cap_rate: Decimal = Decimal("0.30")

    @model_validator(mode="after")
    def _check_tables(self) -> "TaxRules":
        for name in ("earned_income_bands", "income_tax_brackets"):
            table = getattr(self, name)
            if not table:
                raise ValueError(f"{name} must not be empty")
            if table[-1][0] is not None:
                raise ValueError(f"{name} must end with an unbounded band")
            bounds = [upper for upper, _, _ in table[:-1]]
            if None in bounds:
                raise ValueError(f"{name} has an unbounded band before the last one")
            if any(b <= a for a, b in zip(bounds, bounds[1:])):
                raise ValueError(f"{name} upper bounds must be strictly ascending")
        return self

    def creditable_donation(self, donation: int | None) -> int:
        """Donation amount above the 2,000 yen self-burden, never negative."""
        if not donation or donation <= 0:
            return 0
        return max(donation - self.donation_self_burden, 0)

    def with_resident_tax_rate(self, rate: Decimal) -> "TaxRules":
        if rate <= 0 or rate >= 1:
            raise ConfigurationError(f"resident tax rate must be between 0 and 1, got {rate}")
        return self.model_copy(update={"resident_tax_rate": rate})


DEFAULT_RULES = TaxRules()


def rules_for_region(region: str) -> TaxRules:
    """Build rules with the resident tax rate of a named region."""
    rate = REGIONAL_RESIDENT_TAX_RATES.get(region.strip().lower())
    if rate is None:
        valid = ", ".join(REGIONAL_RESIDENT_TAX_RATES)
        raise ConfigurationError(f"unknown region {region!r}. Valid: {valid}")
    return DEFAULT_RULES.with_resident_tax_rate(rate)


def truncate(amount: int, unit: int) -> int:
    """Drop the fraction below ``unit`` (端数切り捨て). Negative amounts become 0."""
    if amount <= 0:
        return 0
    return amount // unit * unit
