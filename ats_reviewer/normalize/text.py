from __future__ import annotations

import re
import unicodedata

_DASH_RE = re.compile(r"[\u2010-\u2015]")
_DOUBLE_QUOTE_RE = re.compile(r"[“”„‟]")
_SINGLE_QUOTE_RE = re.compile(r"[‘’‚‛]")
_BULLET_GLYPH_RE = re.compile(r"[|•·●▪▶►]")
_PAREN_RE = re.compile(r"[()]")
_SEPARATOR_RE = re.compile(r"[-_/\\]")
# "react.tsx" -> "react tsx " so the extension tokenizes on its own
_TECH_SUFFIX_RE = re.compile(r"\.(js|ts|tsx|jsx)\b", re.IGNORECASE)
_COMBINING_MARK_RE = re.compile(r"[\u0300-\u036f]")
_WHITESPACE_RE = re.compile(r"\s+")


def normalize(raw: str) -> str:
    """Canonicalize raw text before tokenization.

    Unicode folding, punctuation unification, separator splitting and case folding.
    Applying it twice gives the same result as applying it once.
    """
    text = unicodedata.normalize("NFKC", raw or "")
    text = _DASH_RE.sub("-", text)
    text = _DOUBLE_QUOTE_RE.sub('"', text)
    text = _SINGLE_QUOTE_RE.sub("'", text)
    text = text.replace("\u00a0", " ")
    text = _BULLET_GLYPH_RE.sub(" ", text)
    text = _PAREN_RE.sub(" ", text)
    text = _SEPARATOR_RE.sub(" ", text)
    text = text.lower()
    text = _COMBINING_MARK_RE.sub("", unicodedata.normalize("NFKD", text))
    text = _TECH_SUFFIX_RE.sub(r" \1 ", text)
    return _WHITESPACE_RE.sub(" ", text).strip()
