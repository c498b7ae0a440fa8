"""Taxpayer input loader for YAML and JSON files."""

import json
import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from furusato.exceptions import InputLoadError, UnrecognizedDeclarationMethodError
from furusato.models.taxpayer import TaxpayerInput

logger = logging.getLogger(__name__)

YAML_SUFFIXES = {".yml", ".yaml"}


def _read_document(file_path: Path) -> object:
    text = file_path.read_text(encoding="utf-8")
    if file_path.suffix.lower() == ".json":
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise InputLoadError(str(file_path), f"invalid JSON: {exc}") from exc
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise InputLoadError(str(file_path), f"invalid YAML: {exc}") from exc


def parse_input(raw: object, source: str = "<input>", strict: bool = False) -> TaxpayerInput:
    """Validate an already-decoded mapping into a TaxpayerInput.

    With ``strict`` an unrecognized declaration method is rejected instead of
    being carried through as an UnrecognizedMethod.
    """
    if not isinstance(raw, dict):
        raise InputLoadError(source, f"expected a mapping, got {type(raw).__name__}")
    try:
        taxpayer = TaxpayerInput.model_validate(raw)
    except ValidationError as exc:
        fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in exc.errors())
        raise InputLoadError(source, f"invalid fields: {fields}") from exc

    if not taxpayer.has_recognized_method:
        raw = taxpayer.declaration_method.raw
        if strict:
            raise UnrecognizedDeclarationMethodError(source, raw)
        logger.info("Keeping unrecognized declaration method %r from %s", raw, source)
    return taxpayer


def load_input(file_path: Path, strict: bool = False) -> TaxpayerInput:
    """Read a taxpayer input file. ``.json`` is parsed as JSON, anything else as YAML."""
    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")
    if file_path.suffix.lower() not in YAML_SUFFIXES | {".json"}:
        logger.info("Unknown input suffix %r; reading %s as YAML", file_path.suffix, file_path)
    return parse_input(_read_document(file_path), str(file_path), strict=strict)
