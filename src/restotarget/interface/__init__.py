"""Operator-facing interface: CLI and relation validation."""

from .validation import ValidationResult, validate_relation

__all__ = ["ValidationResult", "validate_relation"]
