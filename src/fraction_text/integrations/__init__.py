"""Integrations with pydantic models and unit formatting."""

from fraction_text.integrations.measurement import format_measurement
from fraction_text.integrations.pydantic_adapter import fraction_fields_parser

__all__ = ["format_measurement", "fraction_fields_parser"]
