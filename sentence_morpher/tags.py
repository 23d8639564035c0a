"""Кодирование наборов граммем произведением простых чисел.

Каждая граммема (часть речи или значение категории) при первом появлении
получает очередное простое число. Код набора граммем равен произведению
простых чисел его членов, поэтому набор R входит в набор E тогда и только
тогда, когда код E делится на код R, а частное простое ровно при одной
лишней граммеме.

Коды считаются в 32 битах. В полном словаре OpenCorpora больше сотни
граммем, и произведение для формы с 6-8 граммемами выходит за 2**32,
поэтому по умолчанию используется политика ``wrap`` (умножение по модулю
2**32). Политика ``strict`` прерывает построение словаря при переполнении.
"""

from __future__ import annotations

import enum
import logging
import re
from types import MappingProxyType
from typing import Iterable

from .errors import RegistryFrozenError, TagCodeOverflowError
from .primes import BASE_PRIME, next_prime

logger = logging.getLogger(__name__)

UINT32_MAX = 2 ** 32 - 1

# код без ограничений: пустой набор или набор с неизвестной граммемой
NEUTRAL_CODE = 1

_DICTIONARY_TAG_SEPARATORS = re.compile(r"[,\s]+")


class OverflowPolicy(enum.Enum):
    """Поведение при выходе кода за 32 бита."""

    STRICT = "strict"
    WRAP = "wrap"


def split_dictionary_tags(field: str) -> list[str]:
    """Разбивает поле граммем строки словаря по запятым и пробелам."""
    return [tag for tag in _DICTIONARY_TAG_SEPARATORS.split(field) if tag]


def split_specifier_tags(specifier: str) -> list[str]:
    """Разбивает спецификатор ``{...}`` из предложения по запятым."""
    return [tag for tag in specifier.split(",") if tag]


class TagRegistry:
    """Реестр граммема -> простое число.

    Пишет в реестр только построитель словаря через :meth:`encode`. После
    :meth:`freeze` новые граммемы не назначаются, а :meth:`lookup_code`
    работает только на чтение.
    """

    def __init__(self, overflow: OverflowPolicy = OverflowPolicy.WRAP) -> None:
        self._primes: dict[str, int] = {}
        self._max_prime = 0
        self._overflow = OverflowPolicy(overflow)
        self._frozen = False

    def __len__(self) -> int:
        return len(self._primes)

    def __contains__(self, token) -> bool:
        return token.lower() in self._primes

    def __repr__(self) -> str:
        return "<TagRegistry tags=%d max_prime=%d%s>" % (
            len(self._primes),
            self._max_prime,
            " frozen" if self._frozen else "",
        )

    @property
    def overflow(self) -> OverflowPolicy:
        return self._overflow

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def max_prime(self) -> int:
        """Наибольшее назначенное простое число, 0 для пустого реестра."""
        return self._max_prime

    def freeze(self) -> None:
        self._frozen = True

    def as_mapping(self):
        """Представление реестра только для чтения."""
        return MappingProxyType(self._primes)

    def prime_of(self, token: str) -> int | None:
        return self._primes.get(token.lower())

    def encode(self, tokens: Iterable[str]) -> int:
        """Вычисляет код набора граммем, назначая простые числа новым граммемам.

        Повторная граммема умножает код ещё раз. При политике ``strict``
        выход за 32 бита приводит к :class:`TagCodeOverflowError`, при
        ``wrap`` код берётся по модулю 2**32.
        """
        tokens = [token.lower() for token in tokens if token]
        code = NEUTRAL_CODE
        for token in tokens:
            prime = self._primes.get(token)
            if prime is None:
                prime = self._assign(token)
            code = self._multiply(code, prime)
            if code > UINT32_MAX:
                raise TagCodeOverflowError(tokens)
        return code

    def lookup_code(self, tokens: Iterable[str]) -> int:
        """Вычисляет код набора граммем без изменения реестра.

        Если хотя бы одна граммема неизвестна, весь набор считается пустым
        и возвращается нейтральный код 1.
        """
        code = NEUTRAL_CODE
        for token in tokens:
            if not token:
                continue
            prime = self._primes.get(token.lower())
            if prime is None:
                logger.debug("неизвестная граммема %r, спецификатор без ограничений", token)
                return NEUTRAL_CODE
            # при strict код может выйти за 32 бита, тогда он ни с чем не совпадёт
            code = self._multiply(code, prime)
        return code

    def _assign(self, token: str) -> int:
        if self._frozen:
            raise RegistryFrozenError(token)
        if not self._primes:
            prime = BASE_PRIME
        else:
            prime = next_prime(self._max_prime)
        self._primes[token] = prime
        self._max_prime = prime
        logger.debug("граммема %r -> %d", token, prime)
        return prime

    def _multiply(self, code: int, prime: int) -> int:
        code *= prime
        if self._overflow is OverflowPolicy.WRAP:
            code &= UINT32_MAX
        return code
