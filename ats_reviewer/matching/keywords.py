from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from ats_reviewer.core.config.scoring import get_scoring_value
from ats_reviewer.normalize.tokenize import base_form


@dataclass(frozen=True, slots=True)
class KeywordSets:
    matched: tuple[str, ...] = ()
    missing: tuple[str, ...] = ()


def is_near(left: str, right: str) -> bool:
    """Bounded single-edit check: at most one mismatch in one left-to-right scan.

    On a mismatch the longer string advances; equal lengths advance together, so a
    transposition ("ab" / "ba") counts as two mismatches.
    """
    if left == right:
        return True
    left_len, right_len = len(left), len(right)
    if abs(left_len - right_len) > 1:
        return False

    diff = 0
    i = j = 0
    while i < left_len and j < right_len:
        if left[i] == right[j]:
            i += 1
            j += 1
            continue
        diff += 1
        if diff > 1:
            return False
        if left_len > right_len:
            i += 1
        elif right_len > left_len:
            j += 1
        else:
            i += 1
            j += 1
    return True


def _unique(items: Iterable[str], limit: int) -> tuple[str, ...]:
    return tuple(dict.fromkeys(items))[:limit]


def match_keywords(
    jd_phrases: Iterable[str],
    resume_phrases: Iterable[str],
    jd_base_set: set[str],
    resume_base_set: set[str],
) -> KeywordSets:
    max_terms = int(get_scoring_value("keyword.max_terms", 200))
    resume_phrase_set = set(resume_phrases)
    matched: list[str] = []
    missing: list[str] = []

    # Phrase pass: verbatim, near, or stemmed base present in the résumé.
    for phrase in jd_phrases:
        found = (
            phrase in resume_phrase_set
            or any(is_near(candidate, phrase) for candidate in resume_phrase_set)
            or base_form(phrase) in resume_base_set
        )
        (matched if found else missing).append(phrase)

    # Token pass over base forms; sorted so output order does not depend on set hashing.
    for token in sorted(jd_base_set):
        (matched if token in resume_base_set else missing).append(token)

    matched_unique = dict.fromkeys(matched)
    return KeywordSets(
        matched=_unique(matched_unique, max_terms),
        missing=_unique((term for term in missing if term not in matched_unique), max_terms),
    )
