"""Shared test fixtures for Furusato."""

from decimal import Decimal

import pytest

from furusato.engines.rules import TaxRules, rules_for_region
from furusato.models.enums import DeclarationMethod
from furusato.models.taxpayer import TaxpayerInput


@pytest.fixture
def sample_taxpayer() -> TaxpayerInput:
    """Salaried worker with a side business, one dependent and a spouse."""
    return TaxpayerInput(
        salary_income=5_000_000,
        miscellaneous_income=100_000,
        business_income=500_000,
        medical_expenses=150_000,
        social_insurance=600_000,
        dependent_count=1,
        spouse_deduction=True,
        declaration_method=DeclarationMethod.ELECTRONIC,
    )


@pytest.fixture
def zero_taxpayer() -> TaxpayerInput:
    return TaxpayerInput()


@pytest.fixture
def ten_percent_taxpayer() -> TaxpayerInput:
    """Income-tax taxable income of 1,960,000 yen, just above the 5% bracket.

    With no salary the 550,000 yen earned-income deduction still applies,
    so total income is 2,440,000.
    """
    return TaxpayerInput(miscellaneous_income=2_990_000)


@pytest.fixture
def high_earner() -> TaxpayerInput:
    return TaxpayerInput(salary_income=20_000_000)


@pytest.fixture
def kanagawa_rules() -> TaxRules:
    return rules_for_region("kanagawa")


@pytest.fixture
def out_of_model_rules() -> TaxRules:
    """Resident tax rate so high the special credit rate turns negative."""
    return TaxRules(resident_tax_rate=Decimal("0.95"))


SAMPLE_INPUT_YAML = """\
salaryIncome: 5000000
miscellaneousIncome: 100000
businessIncome: 500000
medicalExpenses: 150000
socialInsurance: 600000
dependentCount: 1
spouseDeduction: true
declarationMethod: electronic
"""


@pytest.fixture
def sample_input_file(tmp_path):
    path = tmp_path / "furusato.yml"
    path.write_text(SAMPLE_INPUT_YAML)
    return path
