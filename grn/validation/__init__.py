"""Модуль валидации государственных регистрационных номеров."""
from grn.validation.base import FormatRule, GrnArgumentError, GrnType, GrnValidationResult
from grn.validation.rules import CHECK_ORDER, FORMAT_RULES, REGION_CODES
from grn.validation.validator import GrnValidator, detect_type, is_valid, validate

__all__ = [
    "CHECK_ORDER",
    "FORMAT_RULES",
    "REGION_CODES",
    "FormatRule",
    "GrnArgumentError",
    "GrnType",
    "GrnValidationResult",
    "GrnValidator",
    "detect_type",
    "is_valid",
    "validate",
]
