"""Enumerations for Furusato."""

from enum import StrEnum


class DeclarationMethod(StrEnum):
    """Blue-return filing method for business income (青色申告の申告方法)."""

    NONE = "none"
    ELECTRONIC = "electronic"  # e-Tax filing with electronic bookkeeping
    PAPER = "paper"  # double-entry bookkeeping on paper
    SIMPLE = "simple"  # simplified bookkeeping
