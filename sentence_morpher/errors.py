"""Исключения построения словаря.

Разбор словаря строгий: любая структурная ошибка прерывает построение.
Склонение предложений, наоборот, никогда не бросает исключений и при любой
неудаче возвращает исходное слово.
"""

from __future__ import annotations


class MorphDictionaryError(Exception):
    """Базовый класс ошибок словаря."""


class DictionaryFormatError(MorphDictionaryError, ValueError):
    """Строка словаря не соответствует формату OpenCorpora plain-text."""

    def __init__(self, lineno: int, line: str, detail: str) -> None:
        super().__init__(f"строка {lineno}: {detail}: {line!r}")
        self.lineno = lineno
        self.line = line
        self.detail = detail


class TagCodeOverflowError(MorphDictionaryError, OverflowError):
    """Произведение простых чисел вышло за 32 бита."""

    def __init__(self, tokens) -> None:
        tokens = tuple(tokens)
        super().__init__(
            "код набора граммем не помещается в 32 бита: " + ",".join(tokens)
        )
        self.tokens = tokens


class RegistryFrozenError(MorphDictionaryError, RuntimeError):
    """Попытка назначить простое число после построения словаря."""

    def __init__(self, token: str) -> None:
        super().__init__(f"реестр граммем заморожен, граммема {token!r} не назначена")
        self.token = token
