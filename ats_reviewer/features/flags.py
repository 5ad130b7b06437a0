from __future__ import annotations

from typing import Callable, NamedTuple

from ats_reviewer.core.config.scoring import get_scoring_value
from ats_reviewer.normalize.utils import count_signal, has_signal
from ats_reviewer.schemas.analysis import DocHints
from ats_reviewer.scoring.heuristics import average_sentence_words, bullet_count, has_section


class FlagRule(NamedTuple):
    message: str
    triggered: Callable[[str, DocHints | None], bool]


def _missing_contact(text: str, hints: DocHints | None) -> bool:
    if hints is not None:
        return not hints.emails and not hints.phones
    return not has_signal("email", text) and not has_signal("phone", text)


def _few_bullets(text: str, hints: DocHints | None) -> bool:
    return bullet_count(text, hints) < int(get_scoring_value("flags.min_bullets", 6))


def _max_sentence_words() -> float:
    return float(get_scoring_value("clarity.max_avg_sentence_words", 28))


def _long_sentences(text: str, _hints: DocHints | None) -> bool:
    return average_sentence_words(text) > _max_sentence_words()


def _heavy_passive(text: str, _hints: DocHints | None) -> bool:
    return count_signal("passive_voice", text) > int(get_scoring_value("flags.max_passive_hits", 5))


# Checked in this order; the first six mirror the ATS structure points.
FLAG_RULES: tuple[FlagRule, ...] = (
    FlagRule(
        "Add a brief Professional Summary (2-3 lines).",
        lambda text, hints: not has_section("summary_section", text, hints),
    ),
    FlagRule(
        "Add an Education section.",
        lambda text, hints: not has_section("education_section", text, hints),
    ),
    FlagRule(
        "Add an Experience section.",
        lambda text, hints: not has_section("experience_section", text, hints),
    ),
    FlagRule(
        "Add a Skills section.",
        lambda text, hints: not has_section("skills_section", text, hints),
    ),
    FlagRule("Use bullet points for readability and scannability.", _few_bullets),
    FlagRule("Ensure contact info (email/phone) is present and selectable.", _missing_contact),
    FlagRule("Shorten long sentences (average above {max_sentence_words} words).", _long_sentences),
    FlagRule("Reduce passive voice; lead with what you did.", _heavy_passive),
)


def build_flags(resume_text: str, hints: DocHints | None = None) -> list[str]:
    max_flags = int(get_scoring_value("flags.max_flags", 10))
    placeholders = {"max_sentence_words": f"{_max_sentence_words():g}"}
    flags = [
        rule.message.format(**placeholders)
        for rule in FLAG_RULES
        if rule.triggered(resume_text, hints)
    ]
    return flags[:max_flags]


def build_fix_list(flags: list[str]) -> list[str]:
    prefix = str(get_scoring_value("flags.fix_prefix", "Fix: "))
    return [f"{prefix}{flag}" for flag in flags]
