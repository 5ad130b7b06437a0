from __future__ import annotations

from typing import NamedTuple

from ats_reviewer.normalize.utils import signal_pattern
from ats_reviewer.schemas.analysis import AnalysisResult

EMAIL_PLACEHOLDER = "[REDACTED_EMAIL]"
PHONE_PLACEHOLDER = "[REDACTED_PHONE]"
URL_PLACEHOLDER = "[REDACTED_URL]"


class RedactionRule(NamedTuple):
    signal: str
    placeholder: str


# Applied in order, one pass each. Placeholders never match a later rule.
REDACTION_RULES: tuple[RedactionRule, ...] = (
    RedactionRule("email", EMAIL_PLACEHOLDER),
    RedactionRule("phone", PHONE_PLACEHOLDER),
    RedactionRule("url", URL_PLACEHOLDER),
)


def redact_text(text: str) -> str:
    redacted = text
    for rule in REDACTION_RULES:
        redacted = signal_pattern(rule.signal).sub(rule.placeholder, redacted)
    return redacted


def redact_result(result: AnalysisResult) -> AnalysisResult:
    """Return a copy of the result with PII scrubbed from every string field."""
    return result.model_copy(
        update={
            "matched_keywords": [redact_text(item) for item in result.matched_keywords],
            "missing_keywords": [redact_text(item) for item in result.missing_keywords],
            "flags": [redact_text(item) for item in result.flags],
            "fix_list": [redact_text(item) for item in result.fix_list],
            "suggested_rewrites": [redact_text(item) for item in result.suggested_rewrites],
            "tailored_summary": redact_text(result.tailored_summary),
        }
    )
