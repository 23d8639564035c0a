"""Склонение слов предложения по встроенным спецификаторам.

Слово со спецификатором записывается как ``слово{ЧАСТЬ_РЕЧИ,атрибут1,...}``.
Слова без спецификатора переносятся в результат без изменений.
"""

from __future__ import annotations

import logging
import re
from types import MappingProxyType
from typing import Iterable, Optional

from .builder import MorphDictionary, build_dictionary
from .primes import is_prime
from .tags import OverflowPolicy, split_specifier_tags

logger = logging.getLogger(__name__)

_WORD_SEPARATORS = re.compile(r"[ \t]")
_SPECIFIER_BRACES = re.compile(r"[{}]")


class SentenceMorpher:
    """Словарь словоформ и операции склонения над ним.

    Экземпляр создаётся через :meth:`create` или :meth:`from_file` и после
    создания не изменяется, поэтому :meth:`morph` можно вызывать из
    нескольких потоков.
    """

    def __init__(self, dictionary: MorphDictionary) -> None:
        self._registry = dictionary.registry
        self._registry.freeze()
        self._lemmas = MappingProxyType({
            lemma: MappingProxyType(dict(forms))
            for lemma, forms in dictionary.lemmas.items()
        })

    @classmethod
    def create(cls, dictionary_lines: Iterable[str],
               overflow: Optional[OverflowPolicy] = None) -> "SentenceMorpher":
        """Создаёт склонятель из строк словаря OpenCorpora plain-text.

        Формат строки: ``СЛОВО<TAB>ЧАСТЬ_РЕЧИ атрибут1,атрибут2,...``.
        """
        if overflow is None:
            overflow = OverflowPolicy.WRAP
        return cls(build_dictionary(dictionary_lines, overflow))

    @classmethod
    def from_file(cls, path, encoding: str = "utf-8",
                  overflow: Optional[OverflowPolicy] = None) -> "SentenceMorpher":
        logger.info("загрузка словаря из %s", path)
        with open(path, "r", encoding=encoding) as f:
            return cls.create(f, overflow)

    @property
    def lemmas(self):
        return self._lemmas

    @property
    def tags(self):
        return self._registry.as_mapping()

    @property
    def registry(self):
        return self._registry

    def morph(self, sentence: str) -> str:
        """Склоняет предложение согласно спецификаторам.

        Результат всегда в нижнем регистре. Если для спецификатора есть
        несколько подходящих форм, берётся первая из них.
        """
        if not sentence or not sentence.strip():
            return ""

        result = []
        for token in _WORD_SEPARATORS.split(sentence.lower()):
            if "{" not in token:
                result.append(token)
                continue

            parts = _SPECIFIER_BRACES.split(token)
            word, specifier = parts[0], parts[1]
            if not specifier.strip():
                result.append(word)
                continue

            code = self._registry.lookup_code(split_specifier_tags(specifier))
            result.append(self.morph_word(word, code))

        return " ".join(result)

    def morph_word(self, word: str, tag_code: int) -> str:
        """Возвращает форму слова для кода граммем или само слово."""
        forms = self._lemmas.get(word)
        if forms is None:
            return word

        form = forms.get(tag_code)
        if form is not None:
            return form

        return self._find_nearest(word, forms, tag_code)

    def _find_nearest(self, word, forms, tag_code):
        # ровно одна лишняя граммема: частное кодов простое
        if tag_code > 0:
            for code, form in forms.items():
                if code % tag_code == 0 and is_prime(code // tag_code):
                    return form

        logger.debug("нет формы слова %r для кода %d", word, tag_code)
        return word
