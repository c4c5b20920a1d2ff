"""Валидация ОГРН, ОГРНИП, ГРН ЕГРЮЛ и ГРН ЕГРИП."""
from __future__ import annotations

from pathlib import Path
from types import MappingProxyType
from typing import FrozenSet, Iterable, Mapping, Optional, Sequence

from grn.validation.base import FormatRule, GrnType, GrnValidationResult
from grn.validation.checksum import all_ascii_digits, checksum_matches, is_ascii_digit
from grn.validation.guards import not_null
from grn.validation.rules import CHECK_ORDER, FORMAT_RULES, REGION_CODES, build_tables
from logging_manager import get_logger

logger = get_logger(__name__)

REGION_SLICE = slice(3, 5)


def check_rule(value: str, rule: FormatRule, region_codes: FrozenSet[str]) -> Optional[str]:
    """Возвращает имя первого нарушенного правила или ``None``."""
    if len(value) != rule.length:
        return "length"
    if value[0] not in rule.first_chars:
        return "first_char"
    # Год записи проверяется только на цифры, без календаря.
    if not (is_ascii_digit(value[1]) and is_ascii_digit(value[2])):
        return "year"
    if value[REGION_SLICE] not in region_codes:
        return "region"
    if not all_ascii_digits(value[5:-1]):
        return "digits"
    if not checksum_matches(value, rule.divisor):
        return "checksum"
    return None


class GrnValidator:
    """Проверяет номера по таблице правил и набору кодов регионов."""

    def __init__(
        self,
        rules: Optional[Mapping[GrnType, FormatRule]] = None,
        order: Optional[Sequence[GrnType]] = None,
        region_codes: Optional[Iterable[str]] = None,
    ) -> None:
        self.rules = FORMAT_RULES if rules is None else MappingProxyType(dict(rules))
        if order is None:
            order = CHECK_ORDER if rules is None else tuple(self.rules)
        self.order = tuple(order)
        self.region_codes = REGION_CODES if region_codes is None else frozenset(region_codes)

    @classmethod
    def from_config(cls, path: Path | str) -> "GrnValidator":
        rules, order, region_codes = build_tables(path)
        return cls(rules, order, region_codes)

    def _rule(self, grn_type: GrnType) -> Optional[FormatRule]:
        return self.rules.get(grn_type)

    def _matches(self, value: str, grn_type: GrnType) -> bool:
        rule = self._rule(grn_type)
        return rule is not None and check_rule(value, rule, self.region_codes) is None

    def is_valid(self, grn: str, grn_type: GrnType = GrnType.ANY) -> bool:
        not_null(grn, "Grn must be not null")
        not_null(grn_type, "Type must be not null")

        if grn_type is GrnType.ANY:
            return any(self._matches(grn, candidate) for candidate in self.order)
        return self._matches(grn, grn_type)

    def validate(self, grn: str, grn_type: GrnType = GrnType.ANY) -> GrnValidationResult:
        not_null(grn, "Grn must be not null")
        not_null(grn_type, "Type must be not null")

        if grn_type is not GrnType.ANY:
            rule = self._rule(grn_type)
            reason = "no_rule" if rule is None else check_rule(grn, rule, self.region_codes)
            if reason is not None:
                logger.debug("Номер %r не прошёл проверку %s: %s", grn, grn_type.value, reason)
                return GrnValidationResult(value=grn, grn_type=None, is_valid=False, reason=reason)
            return GrnValidationResult(value=grn, grn_type=grn_type, is_valid=True)

        for candidate in self.order:
            if self._matches(grn, candidate):
                return GrnValidationResult(value=grn, grn_type=candidate, is_valid=True)
        logger.debug("Номер %r не соответствует ни одному формату", grn)
        return GrnValidationResult(value=grn, grn_type=None, is_valid=False, reason="no_match")

    def detect_type(self, grn: str) -> Optional[GrnType]:
        return self.validate(grn).grn_type


_default_validator = GrnValidator()


def is_valid(grn: str, grn_type: GrnType = GrnType.ANY) -> bool:
    """Проверяет, что строка является корректным номером указанного типа.

    Без типа (или с ``GrnType.ANY``) номер проверяется по всем форматам в
    порядке ОГРН, ГРН ЕГРЮЛ, ОГРНИП, ГРН ЕГРИП.

    Raises:
        GrnArgumentError: если ``grn`` или ``grn_type`` равен ``None``.
    """
    return _default_validator.is_valid(grn, grn_type)


def validate(grn: str, grn_type: GrnType = GrnType.ANY) -> GrnValidationResult:
    """То же, что ``is_valid``, но с найденным типом и причиной отказа."""
    return _default_validator.validate(grn, grn_type)


def detect_type(grn: str) -> Optional[GrnType]:
    return _default_validator.detect_type(grn)


__all__ = ["GrnValidator", "check_rule", "detect_type", "is_valid", "validate"]
