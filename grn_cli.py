# /grn_cli.py
"""CLI для проверки государственных регистрационных номеров.

Номера берутся из аргументов командной строки и/или из файла (по одному на
строку). Для каждого номера печатается строка ``<номер>\\t<valid|invalid>\\t<тип или причина>``.
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional, Sequence

import yaml

from grn.validation import GrnType, GrnValidator
from logging_manager import LoggingManager, get_logger
from settings_manager import SettingsManager

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_ERROR = 2


def _read_numbers(path: str) -> List[str]:
    numbers: List[str] = []
    with open(path, "r", encoding="utf-8") as fh:
        try:
            for line in fh:
                # Убираем только перевод строки: сам номер не нормализуется.
                value = line.rstrip("\r\n")
                if value:
                    numbers.append(value)
        except UnicodeDecodeError as exc:
            raise IOError(f"Файл с номерами {path} не в кодировке UTF-8: {exc}") from exc
    return numbers


def _build_validator(settings: SettingsManager) -> GrnValidator:
    rules_file = settings.get_rules_file()
    if rules_file:
        logger.info("Используются правила из %s", rules_file)
        return GrnValidator.from_config(rules_file)
    return GrnValidator()


def process_numbers(validator: GrnValidator, numbers: Sequence[str], grn_type: GrnType) -> int:
    invalid = 0
    for number in numbers:
        result = validator.validate(number, grn_type)
        if result.is_valid:
            print(f"{number}\tvalid\t{result.grn_type.value}")
        else:
            invalid += 1
            print(f"{number}\tinvalid\t{result.reason}")
    logger.info("Проверено номеров: %d, некорректных: %d", len(numbers), invalid)
    return EXIT_INVALID if invalid else EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Проверка ОГРН, ОГРНИП, ГРН ЕГРЮЛ и ГРН ЕГРИП.")
    parser.add_argument("numbers", nargs="*", help="Номера для проверки.")
    parser.add_argument("--file", help="Файл с номерами, по одному на строку.")
    parser.add_argument(
        "--type",
        dest="grn_type",
        choices=[member.value for member in GrnType],
        default=None,
        help="Тип номера (по умолчанию берётся из настроек, иначе 'any').",
    )
    parser.add_argument("--settings", default="settings.json", help="Путь к файлу настроек.")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.numbers and not args.file:
        parser.error("нужно указать номера или --file")

    try:
        settings = SettingsManager(args.settings)
        LoggingManager(settings.get_logging_config())
        grn_type = GrnType.parse(args.grn_type or settings.get_default_type())
        validator = _build_validator(settings)
        numbers = list(args.numbers)
        if args.file:
            numbers.extend(_read_numbers(args.file))
    except (IOError, FileNotFoundError) as exc:
        logger.error("Критическая ошибка: %s", exc)
        print(f"Критическая ошибка: {exc}", file=sys.stderr)
        return EXIT_ERROR
    except (ValueError, yaml.YAMLError) as exc:
        logger.error("Некорректная конфигурация: %s", exc)
        print(f"Некорректная конфигурация: {exc}", file=sys.stderr)
        return EXIT_ERROR

    return process_numbers(validator, numbers, grn_type)


if __name__ == "__main__":
    sys.exit(main())
