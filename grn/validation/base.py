"""Базовые структуры для валидации государственных регистрационных номеров."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, FrozenSet, Iterable, Optional

MIN_LENGTH = 6


class GrnArgumentError(ValueError):
    """Нарушение контракта вызова: номер или тип не переданы."""


class GrnType(Enum):
    """Типы государственных регистрационных номеров."""

    # Основной номер юрлица: 13 цифр, начинается с 1 или 5.
    OGRN = "ogrn"
    # Основной номер ИП: 15 цифр, начинается с 3.
    OGRNIP = "ogrnip"
    # Номер записи в ЕГРЮЛ: 13 цифр, начинается с 2, 6, 7, 8 или 9.
    GRN_EGRUL = "grn-egrul"
    # Номер записи в ЕГРИП: 15 цифр, начинается с 4.
    GRN_EGRIP = "grn-egrip"
    # Любой из поддерживаемых типов.
    ANY = "any"

    @classmethod
    def parse(cls, text: str) -> "GrnType":
        key = str(text).strip().lower().replace("_", "-")
        for member in cls:
            if member.value == key:
                return member
        raise ValueError(f"Неизвестный тип номера: {text!r}")


def _expand_chars(items: Iterable[object]) -> FrozenSet[str]:
    """Разворачивает список символов и диапазонов вида "6-9"."""
    chars = set()
    for item in items:
        text = str(item)
        if len(text) == 3 and text[1] == "-":
            start, end = text[0], text[2]
            if start > end:
                raise ValueError(f"Пустой диапазон символов: {text!r}")
            chars.update(chr(code) for code in range(ord(start), ord(end) + 1))
        elif len(text) == 1:
            chars.add(text)
        else:
            raise ValueError(f"Некорректный символ или диапазон: {text!r}")
    return frozenset(chars)


@dataclass(frozen=True)
class FormatRule:
    grn_type: GrnType
    length: int
    first_chars: FrozenSet[str]
    divisor: int
    description: str = ""

    @classmethod
    def from_dict(cls, data: Dict) -> "FormatRule":
        grn_type = GrnType.parse(data.get("type", ""))
        if grn_type is GrnType.ANY:
            raise ValueError("Правило формата не может иметь тип 'any'")
        if "length" not in data or "divisor" not in data:
            raise ValueError(f"Для типа {grn_type.value} не заданы length/divisor")
        first_chars = _expand_chars(data.get("first_chars") or [])
        if not first_chars:
            raise ValueError(f"Для типа {grn_type.value} не заданы first_chars")
        length = int(data["length"])
        divisor = int(data["divisor"])
        # Тип, год, код региона и контрольная цифра занимают минимум 6 позиций.
        if length < MIN_LENGTH:
            raise ValueError(f"Для типа {grn_type.value} длина {length} меньше {MIN_LENGTH}")
        if divisor <= 0:
            raise ValueError(f"Для типа {grn_type.value} делитель должен быть положительным: {divisor}")
        return cls(
            grn_type=grn_type,
            length=length,
            first_chars=first_chars,
            divisor=divisor,
            description=str(data.get("description", "")),
        )


@dataclass(frozen=True)
class GrnValidationResult:
    value: str
    grn_type: Optional[GrnType]
    is_valid: bool
    reason: Optional[str] = None


__all__ = ["FormatRule", "GrnArgumentError", "GrnType", "GrnValidationResult"]
