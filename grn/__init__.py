"""Проверка ОГРН, ОГРНИП, ГРН ЕГРЮЛ и ГРН ЕГРИП."""
from grn.validation import (
    GrnArgumentError,
    GrnType,
    GrnValidationResult,
    GrnValidator,
    detect_type,
    is_valid,
    validate,
)

__all__ = [
    "GrnArgumentError",
    "GrnType",
    "GrnValidationResult",
    "GrnValidator",
    "detect_type",
    "is_valid",
    "validate",
]
