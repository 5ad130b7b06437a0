from __future__ import annotations

import re

from ats_reviewer.core.config.scoring import get_scoring_value
from ats_reviewer.normalize.utils import has_signal, normalize_line, signal_pattern, strip_bullet_prefix

_NON_WORD_RE = re.compile(r"[^\w-]")
_DEFAULT_VERB = "Delivered"
_DEFAULT_REMAINDER = "measurable outcomes for stakeholders."
_QUANTIFY_PROMPT = " - quantify impact (%, $, time, or volume)."


def _capitalize(value: str) -> str:
    return value[:1].upper() + value[1:]


def rewrite_line(line: str) -> str | None:
    """Turn one résumé line into a verb-first bullet, prompting for a metric when none is present."""
    min_chars = int(get_scoring_value("rewrites.min_line_chars", 40))
    has_metric = has_signal("metric", line)
    base = strip_bullet_prefix(line.strip())
    if has_signal("passive_auxiliary", base):
        base = signal_pattern("passive_auxiliary").sub("", base, count=1).strip()

    words = base.split()
    verb = _NON_WORD_RE.sub("", words[0]) if words else ""
    remainder = " ".join(words[1:]) or _DEFAULT_REMAINDER
    suffix = "" if has_metric else _QUANTIFY_PROMPT

    rewritten = normalize_line(f"• {_capitalize(verb or _DEFAULT_VERB)} {remainder}{suffix}")
    return rewritten if len(rewritten) >= min_chars else None


def suggest_rewrites(resume_text: str, limit: int | None = None) -> list[str]:
    max_rewrites = limit if limit is not None else int(get_scoring_value("rewrites.max_rewrites", 6))
    min_chars = int(get_scoring_value("rewrites.min_line_chars", 40))
    rewrites: list[str] = []
    for raw_line in (resume_text or "").splitlines():
        if len(rewrites) >= max_rewrites:
            break
        line = raw_line.strip()
        if len(line) < min_chars:
            continue
        rewritten = rewrite_line(line)
        if rewritten:
            rewrites.append(rewritten)
    return rewrites
