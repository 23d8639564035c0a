"""Настройки из переменных окружения.

- ``SENTENCE_MORPHER_DICT``: путь к словарю OpenCorpora plain-text.
- ``SENTENCE_MORPHER_ENCODING``: кодировка словаря, по умолчанию ``utf-8``.
- ``SENTENCE_MORPHER_OVERFLOW``: ``strict`` или ``wrap``, по умолчанию ``wrap``.
- ``SENTENCE_MORPHER_LOG_LEVEL``: уровень логирования, по умолчанию ``WARNING``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .tags import OverflowPolicy

DICT_PATH_ENV = "SENTENCE_MORPHER_DICT"
ENCODING_ENV = "SENTENCE_MORPHER_ENCODING"
OVERFLOW_ENV = "SENTENCE_MORPHER_OVERFLOW"
LOG_LEVEL_ENV = "SENTENCE_MORPHER_LOG_LEVEL"

DEFAULT_ENCODING = "utf-8"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    dict_path: Optional[str] = None
    encoding: str = DEFAULT_ENCODING
    overflow: OverflowPolicy = OverflowPolicy.WRAP
    log_level: str = DEFAULT_LOG_LEVEL


def parse_overflow(value: str) -> OverflowPolicy:
    try:
        return OverflowPolicy(value.strip().lower())
    except ValueError:
        allowed = ", ".join(policy.value for policy in OverflowPolicy)
        raise ValueError(
            f"неизвестная политика переполнения {value!r}, допустимо: {allowed}"
        ) from None


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Читает настройки из окружения (по умолчанию ``os.environ``)."""
    if environ is None:
        environ = os.environ

    overflow = environ.get(OVERFLOW_ENV)
    return Settings(
        dict_path=environ.get(DICT_PATH_ENV) or None,
        encoding=environ.get(ENCODING_ENV) or DEFAULT_ENCODING,
        overflow=parse_overflow(overflow) if overflow else OverflowPolicy.WRAP,
        log_level=(environ.get(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL).upper(),
    )
