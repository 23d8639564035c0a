"""Построение словаря из OpenCorpora plain-text.

Формат словаря::

    1
    ёж	NOUN,anim,masc sing,nomn
    ежа	NOUN,anim,masc sing,gent
    ...

Строка, начинающаяся с цифры, отделяет лексемы. Следующая за ней непустая
строка задаёт лемму, остальные строки группы являются её словоформами.
"""

from __future__ import annotations

import collections
import enum
import logging
from typing import Iterable

from .errors import DictionaryFormatError
from .tags import OverflowPolicy, TagRegistry, split_dictionary_tags

logger = logging.getLogger(__name__)

MorphDictionary = collections.namedtuple("MorphDictionary", "lemmas registry")


class ParserState(enum.Enum):
    INFLECTIONS = "inflections"
    AWAIT_HEADER = "await_header"


def _is_group_marker(line: str) -> bool:
    return "0" <= line[0] <= "9"


def _surface(line: str) -> str:
    return line.split("\t", 1)[0]


def _encode_line(line: str, lineno: int, registry: TagRegistry) -> int:
    fields = [field for field in line.split("\t") if field]
    if len(fields) < 2:
        raise DictionaryFormatError(lineno, line, "нет поля граммем")
    return registry.encode(split_dictionary_tags(fields[1]))


def build_dictionary(
    lines: Iterable[str],
    overflow: OverflowPolicy = OverflowPolicy.WRAP,
) -> MorphDictionary:
    """Строит словарь лемм и реестр граммем за один проход по строкам.

    Для новой леммы её собственная строка не сохраняется и граммемы строки
    не кодируются. Повторный заголовок уже известной леммы (омонимичная
    лексема) добавляет свою форму в существующую запись. Для каждой пары
    (лемма, код) сохраняется первая встреченная форма.

    :raises DictionaryFormatError: словоформа встретилась раньше первой
        леммы или у строки нет поля граммем.
    """
    registry = TagRegistry(overflow)
    lemmas: dict[str, dict[int, str]] = {}
    state = ParserState.INFLECTIONS
    current_word = ""
    forms = 0

    for lineno, raw_line in enumerate(lines, 1):
        line = raw_line.rstrip("\r\n").lower()
        if not line.strip():
            continue

        if _is_group_marker(line):
            state = ParserState.AWAIT_HEADER
            continue

        if state is ParserState.AWAIT_HEADER:
            state = ParserState.INFLECTIONS
            current_word = _surface(line)
            if current_word not in lemmas:
                lemmas[current_word] = {}
                if not len(lemmas) % 50000:
                    logger.debug("разобрано лемм: %d", len(lemmas))
                continue

            code = _encode_line(line, lineno, registry)
            entry = lemmas[current_word]
            if code not in entry:
                entry[code] = current_word
                forms += 1
            continue

        if not current_word:
            raise DictionaryFormatError(lineno, line, "словоформа до первой леммы")

        code = _encode_line(line, lineno, registry)
        entry = lemmas[current_word]
        if code not in entry:
            entry[code] = _surface(line)
            forms += 1

    registry.freeze()
    logger.info(
        "словарь построен: лемм %d, форм %d, граммем %d",
        len(lemmas), forms, len(registry),
    )
    return MorphDictionary(lemmas, registry)
