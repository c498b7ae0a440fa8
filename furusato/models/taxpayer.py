"""Taxpayer input model.

Field aliases are the external names used in input files
(``salaryIncome``, ``declarationMethod``, ...). Attributes are snake_case.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_serializer

from furusato.models.enums import DeclarationMethod


class UnrecognizedMethod(BaseModel):
    """A declaration method value that matches no known filing method."""

    model_config = ConfigDict(frozen=True)

    raw: str

    @model_serializer
    def _dump(self) -> str:
        return self.raw

    def __str__(self) -> str:
        return self.raw


def resolve_declaration_method(value: object) -> DeclarationMethod | UnrecognizedMethod:
    """Map a raw value onto a DeclarationMethod, or wrap it as unrecognized.

    Matching is case-insensitive and ignores surrounding whitespace. An empty
    or missing value means no blue-return filing.
    """
    if isinstance(value, (DeclarationMethod, UnrecognizedMethod)):
        return value
    if value is None:
        return DeclarationMethod.NONE
    text = str(value).strip().lower()
    if not text:
        return DeclarationMethod.NONE
    try:
        return DeclarationMethod(text)
    except ValueError:
        return UnrecognizedMethod(raw=str(value))


class TaxpayerInput(BaseModel):
    """One taxpayer's annual income and deduction figures, in yen."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    salary_income: int = Field(
        default=0, ge=0, alias="salaryIncome",
        description="Gross salary (源泉徴収票の支払金額)",
    )
    miscellaneous_income: int = Field(
        default=0, ge=0, alias="miscellaneousIncome",
        description="Miscellaneous income (雑所得)",
    )
    business_income: int = Field(
        default=0, ge=0, alias="businessIncome",
        description="Business income before the blue-return deduction (事業所得)",
    )
    medical_expenses: int = Field(
        default=0, ge=0, alias="medicalExpenses",
        description="Medical expenses paid, before the threshold",
    )
    social_insurance: int = Field(
        default=0, ge=0, alias="socialInsurance",
        description="Social insurance premiums paid (社会保険料控除)",
    )
    dependent_count: int = Field(
        default=0, ge=0, alias="dependentCount",
        description="General dependents (一般の控除対象扶養親族)",
    )
    spouse_deduction: bool = Field(default=False, alias="spouseDeduction")
    declaration_method: DeclarationMethod | UnrecognizedMethod = Field(
        default=DeclarationMethod.NONE, alias="declarationMethod",
    )

    @field_validator("declaration_method", mode="before")
    @classmethod
    def _resolve_method(cls, value: object) -> DeclarationMethod | UnrecognizedMethod:
        return resolve_declaration_method(value)

    @property
    def has_recognized_method(self) -> bool:
        return isinstance(self.declaration_method, DeclarationMethod)
