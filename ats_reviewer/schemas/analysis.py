from __future__ import annotations

from typing import Any, Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from ats_reviewer.core.config import settings
from ats_reviewer.core.config.scoring import get_scoring_value

ExtractionMethod = Literal["structured-extraction", "plain-decode"]

_DEFAULT_WEIGHTS = {"ats": 0.30, "keyword_match": 0.35, "impact": 0.20, "clarity": 0.15}


def default_weight(name: str) -> float:
    return float(get_scoring_value(f"weights.{name}", _DEFAULT_WEIGHTS[name]))


class Weights(BaseModel):
    model_config = ConfigDict(frozen=True)

    ats: float = Field(default_factory=lambda: default_weight("ats"), ge=0.0, allow_inf_nan=False)
    keyword_match: float = Field(default_factory=lambda: default_weight("keyword_match"), ge=0.0, allow_inf_nan=False)
    impact: float = Field(default_factory=lambda: default_weight("impact"), ge=0.0, allow_inf_nan=False)
    clarity: float = Field(default_factory=lambda: default_weight("clarity"), ge=0.0, allow_inf_nan=False)


class DocHints(BaseModel):
    """Structural signals supplied by the document extraction stage."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    pages: int | None = Field(default=None, ge=0)
    info: dict[str, Any] | None = None
    metadata: dict[str, Any] | None = None
    emails: list[str] = Field(default_factory=list)
    phones: list[str] = Field(default_factory=list)
    links: list[str] = Field(default_factory=list)
    headings: list[str] = Field(default_factory=list)
    bullets: list[str] = Field(default_factory=list)
    char_count: int = Field(default=0, ge=0, alias="charCount")
    method: ExtractionMethod = "plain-decode"


class AnalysisHints(BaseModel):
    model_config = ConfigDict(frozen=True)

    resume: DocHints | None = None
    jd: DocHints | None = None


class AnalysisRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    resume_text: str = Field(
        default="",
        max_length=settings.analyze_max_chars,
        validation_alias=AliasChoices("resume_text", "resumeText", "resume"),
    )
    jd_text: str = Field(
        default="",
        max_length=settings.analyze_max_chars,
        validation_alias=AliasChoices("jd_text", "jdText", "jd"),
    )
    weights: Weights = Field(default_factory=Weights)
    redact: bool = Field(
        default_factory=lambda: settings.redact_pii_default,
        validation_alias=AliasChoices("redact", "redactPII", "redact_pii"),
    )
    hints: AnalysisHints | None = None


class ScoreBundle(BaseModel):
    model_config = ConfigDict(frozen=True)

    overall: int = Field(ge=0, le=100)
    ats: int = Field(ge=0, le=100)
    keyword_match: int = Field(ge=0, le=100)
    impact: int = Field(ge=0, le=100)
    clarity: int = Field(ge=0, le=100)


class AnalysisResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    scores: ScoreBundle
    matched_keywords: list[str] = Field(default_factory=list)
    missing_keywords: list[str] = Field(default_factory=list)
    matched_count: int = Field(default=0, ge=0)
    missing_count: int = Field(default=0, ge=0)
    flags: list[str] = Field(default_factory=list, max_length=10)
    fix_list: list[str] = Field(default_factory=list, max_length=10)
    suggested_rewrites: list[str] = Field(default_factory=list, max_length=6)
    tailored_summary: str = ""
