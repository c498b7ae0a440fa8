"""Report output models."""

from decimal import Decimal

from pydantic import BaseModel, Field, computed_field

from furusato.models.taxpayer import TaxpayerInput


class DonationEffect(BaseModel):
    """Tax reduction produced by one hypothetical donation amount."""

    amount: int
    income_tax_saving: int
    resident_tax_saving: int

    @computed_field
    @property
    def total_saving(self) -> int:
        return self.income_tax_saving + self.resident_tax_saving

    @computed_field
    @property
    def self_burden(self) -> int:
        return self.amount - self.total_saving


class DonationCeilings(BaseModel):
    """The three statutory donation ceilings.

    ``resident_special`` is the closed-form limit from the 20% cap on the
    resident-tax special deduction. The other two are the caps on the income
    tax deduction (40% of total income) and the resident-tax basic deduction
    (30% of total income); they only bind at very low incomes.
    """

    income_tax: int
    resident_basic: int
    resident_special: int

    @computed_field
    @property
    def binding(self) -> int:
        return min(self.income_tax, self.resident_basic, self.resident_special)


class FurusatoEstimate(BaseModel):
    taxpayer: TaxpayerInput

    # Income and deductions
    earned_income_deduction: int
    total_income: int
    medical_deduction: int
    filing_deduction: int
    dependent_deduction: int
    spouse_deduction: int

    # Income tax (national, surtax included)
    taxable_income_for_income_tax: int
    income_tax_rate: Decimal
    income_tax: int

    # Resident tax (所得割 only)
    resident_tax_rate: Decimal
    taxable_income_for_resident_tax: int
    resident_tax: int

    # Donation
    donation_limit: int
    income_tax_saving: int
    resident_tax_saving: int
    ceilings: DonationCeilings
    effects: list[DonationEffect] = Field(default_factory=list)

    warnings: list[str] = Field(default_factory=list)
