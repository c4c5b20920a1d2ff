"""Контрольная сумма ГРН.

Для номеров ЕГРЮЛ (ОГРН, ГРН ЕГРЮЛ) и ЕГРИП (ОГРНИП, ГРН ЕГРИП) алгоритм
одинаковый и отличается только делителем:

    (номер без последней цифры // делитель) % 10 == последняя цифра

Делитель 11 для 13-значных номеров и 13 для 15-значных.
"""
from __future__ import annotations

RADIX = 10


def is_ascii_digit(ch: str) -> bool:
    # str.isdigit() принимает и не-ASCII цифры, например арабо-индийские.
    return "0" <= ch <= "9"


def all_ascii_digits(text: str) -> bool:
    return all(is_ascii_digit(ch) for ch in text)


def checksum_matches(value: str, divisor: int) -> bool:
    """Проверяет последнюю цифру ``value`` как контрольную.

    Нецифровой символ в номере даёт ``False``, а не исключение.
    """
    if len(value) < 2 or not all_ascii_digits(value):
        return False
    body, check = value[:-1], value[-1]
    return int(body) // divisor % RADIX == int(check)


__all__ = ["RADIX", "all_ascii_digits", "checksum_matches", "is_ascii_digit"]
