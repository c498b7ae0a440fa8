"""Data models for Furusato."""

from furusato.models.enums import DeclarationMethod
from furusato.models.reports import DonationCeilings, DonationEffect, FurusatoEstimate
from furusato.models.taxpayer import (
    TaxpayerInput,
    UnrecognizedMethod,
    resolve_declaration_method,
)

__all__ = [
    "DeclarationMethod",
    "DonationCeilings",
    "DonationEffect",
    "FurusatoEstimate",
    "TaxpayerInput",
    "UnrecognizedMethod",
    "resolve_declaration_method",
]
