"""Проверки аргументов на границе публичного API."""
from __future__ import annotations

from typing import Optional, TypeVar

from grn.validation.base import GrnArgumentError

T = TypeVar("T")


def not_null(value: Optional[T], message: str) -> T:
    if value is None:
        raise GrnArgumentError(message)
    return value


__all__ = ["not_null"]
