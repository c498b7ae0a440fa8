"""Custom exceptions for Furusato."""

from decimal import Decimal


class TaxComputationError(Exception):
    """Base exception for tax computation errors."""


class DonationLimitUndefinedError(TaxComputationError):
    """Raised when the special-deduction rate leaves no room for a donation.

    The closed-form limit divides by ``1 - resident_rate - income_rate * (1 + surtax)``;
    a zero or negative value means the configured rates are outside the model.
    """

    def __init__(self, special_deduction_rate: Decimal, income_tax_rate: Decimal):
        self.special_deduction_rate = special_deduction_rate
        self.income_tax_rate = income_tax_rate
        super().__init__(
            f"Donation limit undefined: special deduction rate is "
            f"{special_deduction_rate} at income tax rate {income_tax_rate}"
        )


class ConfigurationError(TaxComputationError):
    """Raised when tax rules cannot be built from the given settings."""

    def __init__(self, message: str):
        super().__init__(f"Configuration error: {message}")


class InputLoadError(TaxComputationError):
    """Raised when a taxpayer input file cannot be read or validated."""

    def __init__(self, source: str, message: str):
        self.source = source
        super().__init__(f"Cannot load input from {source}: {message}")


class UnrecognizedDeclarationMethodError(InputLoadError):
    """Raised in strict mode when the declaration method is not a known value."""

    def __init__(self, source: str, raw: str):
        self.raw = raw
        super().__init__(
            source,
            f"unrecognized declarationMethod {raw!r} "
            "(expected one of: none, electronic, paper, simple)",
        )
