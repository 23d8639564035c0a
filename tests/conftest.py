"""Общие фикстуры: небольшие словари в формате OpenCorpora plain-text."""

import pytest

from sentence_morpher import SentenceMorpher

# noun=2, sing=3, datv=5; граммемы заголовка новой леммы не кодируются
EXAMPLE_LINES = [
    "2",
    "кот\tNOUN sing,nomn",
    "коту\tNOUN sing,datv",
    "3",
]

# noun=2 anim=3 masc=5 sing=7 gent=11 datv=13 accs=17 ablt=19 loct=23 plur=29 nomn=31
CAT_LINES = [
    "1",
    "КОТ\tNOUN,anim,masc sing,nomn",
    "КОТА\tNOUN,anim,masc sing,gent",
    "КОТУ\tNOUN,anim,masc sing,datv",
    "КОТА\tNOUN,anim,masc sing,accs",
    "КОТОМ\tNOUN,anim,masc sing,ablt",
    "КОТЕ\tNOUN,anim,masc sing,loct",
    "КОТЫ\tNOUN,anim,masc plur,nomn",
    "КОТОВ\tNOUN,anim,masc plur,gent",
    "",
    "2",
    "СЕРЫЙ\tADJF,Qual masc,sing,nomn",
    "СЕРОГО\tADJF,Qual masc,sing,gent",
    "СЕРОМУ\tADJF,Qual masc,sing,datv",
]


@pytest.fixture
def example_lines():
    return list(EXAMPLE_LINES)


@pytest.fixture
def cat_lines():
    return list(CAT_LINES)


@pytest.fixture
def morpher(cat_lines):
    return SentenceMorpher.create(cat_lines)


@pytest.fixture
def dict_file(tmp_path):
    """Словарь на диске, как его читает сервер."""
    path = tmp_path / "dict.opcorpora.txt"
    path.write_text("\n".join(CAT_LINES) + "\n", encoding="utf-8")
    return path
