"""Склонение слов предложения по словарю OpenCorpora plain-text."""

from .builder import MorphDictionary, ParserState, build_dictionary
from .errors import (
    DictionaryFormatError,
    MorphDictionaryError,
    RegistryFrozenError,
    TagCodeOverflowError,
)
from .morpher import SentenceMorpher
from .tags import OverflowPolicy, TagRegistry

__all__ = [
    "DictionaryFormatError",
    "MorphDictionary",
    "MorphDictionaryError",
    "OverflowPolicy",
    "ParserState",
    "RegistryFrozenError",
    "SentenceMorpher",
    "TagCodeOverflowError",
    "TagRegistry",
    "build_dictionary",
]

__version__ = "0.1.0"
