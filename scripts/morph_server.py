#!/usr/bin/env python3
"""Сервер склонения предложений по словарю OpenCorpora.

Читает предложения из stdin (по одному на строку), возвращает склонённое
предложение в stdout. Используется как persistent subprocess.

Протокол:
    → stdin:  "кот{NOUN,sing,datv}\n"
    ← stdout: "коту\n"

Путь к словарю задаётся флагом --dict или переменной SENTENCE_MORPHER_DICT.
"""

import argparse
import logging
import sys

from sentence_morpher import MorphDictionaryError, SentenceMorpher
from sentence_morpher.config import load_settings, parse_overflow


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Склонение предложений по словарю OpenCorpora plain-text."
    )
    parser.add_argument("--dict", dest="dict_path", help="путь к словарю")
    parser.add_argument("--encoding", help="кодировка словаря")
    parser.add_argument(
        "--overflow",
        type=parse_overflow,
        help="политика переполнения кода граммем: strict или wrap",
    )
    return parser.parse_args(argv)


def main(argv=None):
    """Основной цикл сервера."""
    args = parse_args(argv)
    try:
        settings = load_settings()
        logging.basicConfig(
            stream=sys.stderr,
            level=settings.log_level,
            format="%(levelname)s %(name)s: %(message)s",
        )
    except ValueError as e:
        print(f"ОШИБКА: {e}", file=sys.stderr, flush=True)
        sys.exit(1)

    dict_path = args.dict_path or settings.dict_path
    if not dict_path:
        print("ОШИБКА: не задан путь к словарю", file=sys.stderr, flush=True)
        sys.exit(1)

    try:
        morpher = SentenceMorpher.from_file(
            dict_path,
            encoding=args.encoding or settings.encoding,
            overflow=args.overflow or settings.overflow,
        )
    except (OSError, MorphDictionaryError) as e:
        print(f"ОШИБКА: словарь не загружен: {e}", file=sys.stderr, flush=True)
        sys.exit(1)

    print("READY", flush=True)

    for line in sys.stdin:
        print(morpher.morph(line.rstrip("\r\n")), flush=True)


if __name__ == "__main__":
    main()
