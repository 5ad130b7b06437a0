from __future__ import annotations

import re
from typing import Iterable

from ats_reviewer.lexicon import Lexicon, get_default_lexicon

_SUFFIX_RE = re.compile(r"(ing|ed|es|s)$")


def tokenize(normalized: str, lexicon: Lexicon | None = None) -> list[str]:
    """Split normalized text into unigrams followed by bigrams of the surviving unigrams."""
    lex = lexicon or get_default_lexicon()
    words: list[str] = []
    for raw in normalized.split(" "):
        word = lex.alias(raw)
        if len(word) <= 1 or lex.is_stopword(word):
            continue
        words.append(word)

    bigrams = [f"{words[index]} {words[index + 1]}" for index in range(len(words) - 1)]
    return words + bigrams


def base_form(token: str) -> str:
    """Strip a single trailing ing/ed/es/s suffix. Not recursive."""
    return _SUFFIX_RE.sub("", token, count=1)


def to_base_set(tokens: Iterable[str]) -> set[str]:
    bases: set[str] = set()
    for token in tokens:
        base = base_form(token)
        if len(base) > 1:
            bases.add(base)
    return bases
