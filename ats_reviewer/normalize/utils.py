from __future__ import annotations

import re
from typing import NamedTuple

_BULLET_GLYPHS = "•·●▪▶►◦■"
_BULLET_PATTERN = re.compile(rf"^\s*(?:[{re.escape(_BULLET_GLYPHS)}]|[-*–—](?=\s))\s*")
_BULLET_LINE_RE = re.compile(rf"^\s*(?:[{re.escape(_BULLET_GLYPHS)}]|[-*–—]\s)", re.MULTILINE)


class SignalRule(NamedTuple):
    name: str
    pattern: re.Pattern[str]


# Surface signals read from original (unnormalized) résumé text.
SIGNAL_RULES: dict[str, SignalRule] = {
    rule.name: rule
    for rule in (
        SignalRule("summary_section", re.compile(r"\b(?:summary|objective)", re.IGNORECASE)),
        SignalRule("education_section", re.compile(r"\beducation", re.IGNORECASE)),
        SignalRule(
            "experience_section",
            re.compile(r"\b(?:experience|employment|work history)", re.IGNORECASE),
        ),
        SignalRule("skills_section", re.compile(r"\bskills", re.IGNORECASE)),
        SignalRule("email", re.compile(r"\b[a-z0-9._%+-]+@[a-z0-9.-]+\.[a-z]{2,}\b", re.IGNORECASE)),
        SignalRule(
            "phone",
            re.compile(r"(?<!\w)(?:\+?1[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}\b"),
        ),
        SignalRule("link", re.compile(r"\b(?:github|linkedin|portfolio)|https?://", re.IGNORECASE)),
        SignalRule("url", re.compile(r"\bhttps?://\S+\b", re.IGNORECASE)),
        SignalRule("bullet_glyph", re.compile(r"[•▪●]")),
        SignalRule("metric", re.compile(r"\b\d+(?:\.\d+)?%|\b\d{2,}[km]?\b", re.IGNORECASE)),
        SignalRule(
            "passive_voice",
            re.compile(r"\b(?:was|were|been|being|be)\s+\w+ed\b", re.IGNORECASE),
        ),
        SignalRule("passive_auxiliary", re.compile(r"\b(?:was|were|been|being|be)\b\s*", re.IGNORECASE)),
    )
}

# Heading names each section signal also accepts from extracted document headings.
SECTION_HEADING_MARKERS: dict[str, tuple[str, ...]] = {
    "summary_section": ("summary", "objective"),
    "education_section": ("education",),
    "experience_section": ("experience", "employment", "work history"),
    "skills_section": ("skills",),
}


def signal_pattern(name: str) -> re.Pattern[str]:
    return SIGNAL_RULES[name].pattern


def has_signal(name: str, text: str) -> bool:
    return bool(signal_pattern(name).search(text or ""))


def count_signal(name: str, text: str) -> int:
    return sum(1 for _ in signal_pattern(name).finditer(text or ""))


def normalize_line(line: str) -> str:
    return re.sub(r"\s+", " ", line).strip()


def strip_bullet_prefix(line: str) -> str:
    return _BULLET_PATTERN.sub("", line, count=1).strip()


def count_bullet_lines(text: str) -> int:
    return len(_BULLET_LINE_RE.findall(text or ""))
