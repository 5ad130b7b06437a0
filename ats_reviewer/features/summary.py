from __future__ import annotations

from ats_reviewer.core.config.scoring import get_scoring_value


def alignment_label(keyword_score: int) -> str:
    if keyword_score >= int(get_scoring_value("summary.strong_threshold", 60)):
        return "strong alignment"
    if keyword_score >= int(get_scoring_value("summary.partial_threshold", 35)):
        return "partial alignment"
    return "foundational alignment"


def build_summary(keyword_score: int, matched_count: int) -> str:
    return (
        f"Results-driven professional with {alignment_label(keyword_score)} to the role; "
        f"matched {matched_count} JD terms. Emphasize quantified outcomes and the most relevant "
        "tools/frameworks referenced in the job description."
    )
