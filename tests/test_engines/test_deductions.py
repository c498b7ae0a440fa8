"""Tests for individual deductions and taxable income."""

import logging

import pytest

from furusato.engines.deductions import (
    business_filing_deduction,
    dependent_deduction,
    earned_income_deduction,
    medical_deduction,
    spouse_deduction_amount,
    taxable_income,
    taxable_income_for_income_tax,
    taxable_income_for_resident_tax,
    total_income,
)
from furusato.models.enums import DeclarationMethod
from furusato.models.taxpayer import TaxpayerInput, UnrecognizedMethod


class TestEarnedIncomeDeduction:
    @pytest.mark.parametrize(
        "salary, expected",
        [
            (0, 550_000),
            (1_625_000, 550_000),
            (1_625_001, 550_000),
            (1_700_003, 580_001),  # 680,001.2 truncated before subtracting
            (1_800_000, 620_000),
            (1_800_001, 620_000),
            (3_600_000, 1_160_000),
            (3_600_001, 1_160_000),
            (5_000_000, 1_440_000),
            (6_600_000, 1_760_000),
            (6_600_001, 1_760_000),
            (8_500_000, 1_950_000),
            (20_000_000, 1_950_000),
        ],
    )
    def test_schedule(self, salary, expected):
        assert earned_income_deduction(salary) == expected


class TestTotalIncome:
    def test_sample(self, sample_taxpayer):
        # 5,000,000 - 1,440,000 + 100,000 + 500,000
        assert total_income(sample_taxpayer) == 4_160_000

    def test_zero(self, zero_taxpayer):
        assert total_income(zero_taxpayer) == -550_000

    def test_small_salary_offsets_other_income(self):
        # 100,000 - 550,000 + 1,000,000
        t = TaxpayerInput(salary_income=100_000, business_income=1_000_000)
        assert total_income(t) == 550_000

    def test_monotonic_in_salary(self):
        previous = total_income(TaxpayerInput())
        for salary in range(0, 10_000_001, 25_000):
            current = total_income(TaxpayerInput(salary_income=salary))
            assert current >= previous, f"total income fell at salary {salary}"
            previous = current


class TestMedicalDeduction:
    def test_threshold_capped_at_100k(self, sample_taxpayer):
        # 5% of 4,160,000 exceeds 100,000
        assert medical_deduction(sample_taxpayer) == 50_000

    def test_threshold_five_percent(self):
        t = TaxpayerInput(miscellaneous_income=1_550_000, medical_expenses=80_000)
        assert medical_deduction(t) == 30_000

    def test_threshold_truncated(self):
        # 5% of 1,000,010 is 50,000.5
        t = TaxpayerInput(miscellaneous_income=1_550_010, medical_expenses=60_000)
        assert medical_deduction(t) == 10_000

    def test_below_threshold(self):
        t = TaxpayerInput(salary_income=5_000_000, medical_expenses=90_000)
        assert medical_deduction(t) == 0

    def test_negative_total_income_lowers_threshold(self):
        # total income -550,000, threshold -27,500
        assert medical_deduction(TaxpayerInput(medical_expenses=40_000)) == 67_500


class TestBusinessFilingDeduction:
    def test_capped_at_business_income(self):
        assert business_filing_deduction(DeclarationMethod.ELECTRONIC, 500_000) == 500_000

    @pytest.mark.parametrize(
        "method, expected",
        [
            (DeclarationMethod.NONE, 0),
            (DeclarationMethod.ELECTRONIC, 650_000),
            (DeclarationMethod.PAPER, 550_000),
            (DeclarationMethod.SIMPLE, 100_000),
        ],
    )
    def test_methods(self, method, expected):
        assert business_filing_deduction(method, 3_000_000) == expected

    def test_no_business_income(self):
        assert business_filing_deduction(DeclarationMethod.ELECTRONIC, 0) == 0

    def test_unrecognized_method_deducts_nothing(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="furusato.engines.deductions"):
            result = business_filing_deduction(UnrecognizedMethod(raw="tablet"), 1_000_000)
        assert result == 0
        assert "tablet" in caplog.text


class TestPersonalDeductions:
    def test_dependents(self):
        assert dependent_deduction(0) == 0
        assert dependent_deduction(3) == 1_140_000

    def test_spouse(self):
        assert spouse_deduction_amount(True) == 380_000
        assert spouse_deduction_amount(False) == 0


class TestTaxableIncome:
    def test_income_tax_basis(self, sample_taxpayer):
        # 4,160,000 - 50,000 - 500,000 - 600,000 - 380,000 - 380,000 - 480,000
        assert taxable_income(sample_taxpayer, 480_000) == 1_770_000
        assert taxable_income_for_income_tax(sample_taxpayer) == 1_770_000

    def test_resident_tax_basis(self, sample_taxpayer):
        assert taxable_income(sample_taxpayer, 430_000) == 1_820_000
        assert taxable_income_for_resident_tax(sample_taxpayer) == 1_820_000

    def test_zero_income(self, zero_taxpayer):
        assert taxable_income(zero_taxpayer, 480_000) == 0

    def test_deductions_exceed_income(self):
        t = TaxpayerInput(salary_income=2_000_000, social_insurance=3_000_000)
        assert taxable_income(t, 480_000) == 0

    def test_unrecognized_method_same_as_none(self):
        base = dict(salary_income=4_000_000, business_income=800_000)
        unknown = TaxpayerInput(**base, declaration_method="tablet")
        none = TaxpayerInput(**base, declaration_method="none")
        assert taxable_income(unknown, 480_000) == taxable_income(none, 480_000)
