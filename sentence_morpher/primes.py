"""Простые числа для кодирования граммем.

Каждой граммеме назначается своё простое число, поэтому здесь нужны только
проверка простоты и поиск следующего простого. Таблиц нет: оба действия
выполняются перебором делителей.
"""

BASE_PRIME = 2


def is_prime(number):
    """Проверяет число на простоту перебором делителей."""
    if number < 2:
        return False
    if number in (2, 3, 5):
        return True
    if number % 2 == 0:
        return False

    divisor = 3
    while divisor * divisor <= number:
        if number % divisor == 0:
            return False
        divisor += 2
    return True


def next_prime(current):
    """Возвращает наименьшее простое число, строго большее ``current``."""
    if current < BASE_PRIME:
        return BASE_PRIME
    if current == BASE_PRIME:
        return 3

    candidate = current + 1 if current % 2 == 0 else current + 2
    while not is_prime(candidate):
        candidate += 2
    return candidate
