from __future__ import annotations

import math
import re
from typing import Iterable

from ats_reviewer.core.config.scoring import get_scoring_value
from ats_reviewer.normalize.utils import (
    SECTION_HEADING_MARKERS,
    count_bullet_lines,
    count_signal,
    has_signal,
)
from ats_reviewer.schemas.analysis import DocHints

ACTION_VERBS = (
    "built",
    "led",
    "reduced",
    "increased",
    "optimized",
    "designed",
    "developed",
    "deployed",
    "automated",
    "delivered",
    "launched",
    "implemented",
    "streamlined",
    "improved",
    "created",
    "managed",
)
_ACTION_VERB_RES = tuple(re.compile(rf"\b{verb}\b", re.IGNORECASE) for verb in ACTION_VERBS)
_SENTENCE_SPLIT_RE = re.compile(r"[.!?]\s")
_WHITESPACE_RE = re.compile(r"\s+")


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def clamp_score(value: float) -> int:
    return max(0, min(100, round_half_up(value)))


def _points(name: str, default: int) -> int:
    return int(get_scoring_value(f"ats.points.{name}", default))


def has_section(section: str, text: str, hints: DocHints | None = None) -> bool:
    if has_signal(section, text):
        return True
    if hints is None:
        return False
    markers = SECTION_HEADING_MARKERS.get(section, ())
    return any(marker in heading.lower() for heading in hints.headings for marker in markers)


def bullet_count(text: str, hints: DocHints | None = None) -> int:
    counted = count_bullet_lines(text)
    if hints is not None:
        counted = max(counted, len(hints.bullets))
    return counted


def has_bullets(text: str, hints: DocHints | None = None) -> bool:
    """Bullet lines, or bullet glyphs used inline as separators."""
    return bullet_count(text, hints) > 0 or has_signal("bullet_glyph", text)


def score_ats(resume_text: str, hints: DocHints | None = None) -> int:
    """Additive structure proxy: section headings, bullets and a reachable contact block."""
    points = 0
    if has_section("summary_section", resume_text, hints):
        points += _points("summary", 15)
    if has_section("education_section", resume_text, hints):
        points += _points("education", 15)
    if has_section("experience_section", resume_text, hints):
        points += _points("experience", 20)
    if has_section("skills_section", resume_text, hints):
        points += _points("skills", 15)
    if has_bullets(resume_text, hints):
        points += _points("bullets", 10)
    if has_signal("email", resume_text) or (hints is not None and hints.emails):
        points += _points("email", 10)
    if has_signal("phone", resume_text) or (hints is not None and hints.phones):
        points += _points("phone", 5)
    if has_signal("link", resume_text) or (hints is not None and hints.links):
        points += _points("link", 10)
    return clamp_score(points)


def score_keyword_coverage(matched_count: int, missing_count: int) -> int:
    return clamp_score(matched_count / max(1, matched_count + missing_count) * 100)


def blend_keyword_score(coverage: float, similarity: float, coverage_share: float | None = None) -> int:
    share = coverage_share
    if share is None:
        share = float(get_scoring_value("keyword.similarity_coverage_share", 0.6))
    share = max(0.0, min(1.0, share))
    return clamp_score(coverage * share + similarity * (1 - share))


def count_action_verbs(text: str) -> int:
    return sum(1 for pattern in _ACTION_VERB_RES if pattern.search(text or ""))


def score_impact(resume_text: str, hints: DocHints | None = None) -> int:
    """Quantified results, distinct action verbs and bullet density on top of a base score."""
    base = int(get_scoring_value("impact.base", 30))
    metric_hits = count_signal("metric", resume_text)
    verb_hits = count_action_verbs(resume_text)
    bullet_units = bullet_count(resume_text, hints) // max(1, int(get_scoring_value("impact.bullets_per_unit", 5)))

    metric_bonus = min(
        int(get_scoring_value("impact.metric_cap", 40)),
        metric_hits * int(get_scoring_value("impact.metric_points", 6)),
    )
    verb_bonus = min(
        int(get_scoring_value("impact.verb_cap", 20)),
        verb_hits * int(get_scoring_value("impact.verb_points", 4)),
    )
    bullet_bonus = min(
        int(get_scoring_value("impact.bullet_cap", 10)),
        bullet_units * int(get_scoring_value("impact.bullet_unit_points", 2)),
    )
    return clamp_score(base + metric_bonus + verb_bonus + bullet_bonus)


def average_sentence_words(text: str) -> float:
    collapsed = _WHITESPACE_RE.sub(" ", text or "").strip()
    sentences = [sentence for sentence in _SENTENCE_SPLIT_RE.split(collapsed) if sentence]
    if not sentences:
        return float(get_scoring_value("clarity.empty_avg_sentence_words", 18))
    return len(collapsed.split()) / len(sentences)


def score_clarity(resume_text: str) -> int:
    score = 100.0
    max_words = float(get_scoring_value("clarity.max_avg_sentence_words", 28))
    avg_words = average_sentence_words(resume_text)
    if avg_words > max_words:
        score -= min(
            float(get_scoring_value("clarity.length_penalty_cap", 40)),
            (avg_words - max_words) * float(get_scoring_value("clarity.length_penalty_per_word", 2)),
        )
    passive_hits = count_signal("passive_voice", resume_text)
    score -= min(
        float(get_scoring_value("clarity.passive_penalty_cap", 30)),
        passive_hits * float(get_scoring_value("clarity.passive_penalty_per_hit", 3)),
    )
    return clamp_score(score)


def _usable_weight(weight: float) -> float:
    value = float(weight)
    if math.isnan(value) or value < 0:
        return 0.0
    return value


def combine(pairs: Iterable[tuple[int, float]]) -> int:
    """Weighted average of (score, weight) pairs; a zero weight sum divides by 1."""
    items = [(max(0, min(100, score)), _usable_weight(weight)) for score, weight in pairs]
    # Scaled to the largest weight; sums stay finite near the float maximum.
    largest = max((weight for _, weight in items), default=0.0)
    if math.isinf(largest):
        items = [(score, 1.0 if math.isinf(weight) else 0.0) for score, weight in items]
    elif largest > 0:
        items = [(score, weight / largest) for score, weight in items]
    weight_sum = sum(weight for _, weight in items) or 1
    return clamp_score(sum(score * weight for score, weight in items) / weight_sum)
