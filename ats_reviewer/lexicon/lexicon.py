from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class Lexicon:
    """Stopword, alias and phrase-filter tables shared by the tokenizer and phrase extractor."""

    stopwords: frozenset[str]
    aliases: Mapping[str, str]
    bigram_leading_words: frozenset[str]

    @classmethod
    def from_file(cls, path: str | Path | None = None) -> "Lexicon":
        source = Path(path) if path else Path(__file__).with_name("lexicon.json")
        with source.open("r", encoding="utf-8") as handle:
            raw = json.load(handle)
        return cls.from_mapping(raw)

    @classmethod
    def from_mapping(cls, raw: Mapping[str, object]) -> "Lexicon":
        stopwords = raw.get("stopwords") or []
        aliases = raw.get("aliases") or {}
        leading = raw.get("bigram_leading_words") or []
        return cls(
            stopwords=frozenset(str(word).strip().lower() for word in stopwords),  # type: ignore[union-attr]
            aliases=MappingProxyType(
                {str(key).strip().lower(): str(value) for key, value in dict(aliases).items()}  # type: ignore[call-overload]
            ),
            bigram_leading_words=frozenset(str(word).strip().lower() for word in leading),  # type: ignore[union-attr]
        )

    def alias(self, word: str) -> str:
        return self.aliases.get(word, word)

    def is_stopword(self, word: str) -> bool:
        return word in self.stopwords
