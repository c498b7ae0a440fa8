"""Input loading for Furusato."""

from furusato.ingestion.loader import load_input, parse_input

__all__ = ["load_input", "parse_input"]
