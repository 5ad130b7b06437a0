from __future__ import annotations

import re
from typing import Iterable

from ats_reviewer.lexicon import Lexicon, get_default_lexicon

_DOMAIN_TERM_RE = re.compile(r"^[a-z0-9.+#-]{2,}$")
_LEADING_WORD_RE = re.compile(r"\w+")


def extract_key_phrases(tokens: Iterable[str], lexicon: Lexicon | None = None) -> list[str]:
    """Keep skill-looking unigrams and bigrams, deduplicated in first-seen order."""
    lex = lexicon or get_default_lexicon()
    phrases: dict[str, None] = {}
    for token in tokens:
        if " " in token:
            leading = _LEADING_WORD_RE.match(token)
            if leading is None or leading.group() not in lex.bigram_leading_words:
                phrases[token] = None
        elif _DOMAIN_TERM_RE.match(token) and not lex.is_stopword(token):
            phrases[token] = None
    return list(phrases)
