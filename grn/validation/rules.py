"""Загрузка правил форматов и кодов регионов из YAML."""
from __future__ import annotations

from pathlib import Path
from types import MappingProxyType
from typing import Dict, FrozenSet, List, Mapping, Tuple

import yaml

from grn.validation.base import FormatRule, GrnType
from grn.validation.checksum import all_ascii_digits
from logging_manager import get_logger

logger = get_logger(__name__)

DEFAULT_RULES_PATH = Path(__file__).parent / "configs" / "grn.yaml"


def _read_yaml(path: Path | str) -> Dict:
    with open(path, "r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Файл правил {path} должен содержать словарь")
    return data


def parse_rules(data: Dict) -> List[FormatRule]:
    rules = [FormatRule.from_dict(item) for item in data.get("formats") or []]
    seen = set()
    for rule in rules:
        if rule.grn_type in seen:
            raise ValueError(f"Тип {rule.grn_type.value} описан несколько раз")
        seen.add(rule.grn_type)
    return rules


def parse_region_codes(data: Dict) -> FrozenSet[str]:
    codes = set()
    for raw in data.get("region_codes") or []:
        code = str(raw)
        if len(code) != 2 or not all_ascii_digits(code):
            raise ValueError(f"Некорректный код региона: {raw!r}")
        codes.add(code)
    return frozenset(codes)


def load_rules(path: Path | str = DEFAULT_RULES_PATH) -> List[FormatRule]:
    return parse_rules(_read_yaml(path))


def load_region_codes(path: Path | str = DEFAULT_RULES_PATH) -> FrozenSet[str]:
    return parse_region_codes(_read_yaml(path))


def build_tables(
    path: Path | str = DEFAULT_RULES_PATH,
) -> Tuple[Mapping[GrnType, FormatRule], Tuple[GrnType, ...], FrozenSet[str]]:
    """Читает файл правил один раз и возвращает неизменяемые таблицы."""
    data = _read_yaml(path)
    rules = parse_rules(data)
    region_codes = parse_region_codes(data)
    logger.debug(
        "Загружены правила ГРН из %s: %d форматов, %d кодов регионов",
        path,
        len(rules),
        len(region_codes),
    )
    by_type = MappingProxyType({rule.grn_type: rule for rule in rules})
    order = tuple(rule.grn_type for rule in rules)
    return by_type, order, region_codes


FORMAT_RULES, CHECK_ORDER, REGION_CODES = build_tables()


__all__ = [
    "CHECK_ORDER",
    "DEFAULT_RULES_PATH",
    "FORMAT_RULES",
    "REGION_CODES",
    "build_tables",
    "load_region_codes",
    "load_rules",
    "parse_region_codes",
    "parse_rules",
]
