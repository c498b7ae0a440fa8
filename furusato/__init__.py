"""Furusato: income tax, resident tax and hometown-tax donation limits."""

__version__ = "0.1.0"
