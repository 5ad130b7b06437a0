from __future__ import annotations

import hashlib
import json
import logging
import time

from ats_reviewer.core.config import settings
from ats_reviewer.features.flags import build_fix_list, build_flags
from ats_reviewer.features.phrases import extract_key_phrases
from ats_reviewer.features.rewrites import suggest_rewrites
from ats_reviewer.features.summary import build_summary
from ats_reviewer.lexicon import Lexicon, get_default_lexicon
from ats_reviewer.matching.keywords import KeywordSets, match_keywords
from ats_reviewer.matching.similarity import tfidf_cosine
from ats_reviewer.normalize.text import normalize
from ats_reviewer.normalize.tokenize import to_base_set, tokenize
from ats_reviewer.privacy.redact import redact_result
from ats_reviewer.schemas.analysis import AnalysisRequest, AnalysisResult, DocHints, ScoreBundle
from ats_reviewer.scoring.heuristics import (
    blend_keyword_score,
    combine,
    score_ats,
    score_clarity,
    score_impact,
    score_keyword_coverage,
)

logger = logging.getLogger(__name__)


def _short_hash(value: str | None) -> str:
    normalized = (value or "").strip()
    if not normalized:
        return ""
    return hashlib.sha256(normalized.encode("utf-8")).hexdigest()[:12]


def _resume_hints(request: AnalysisRequest) -> DocHints | None:
    if request.hints is None:
        return None
    return request.hints.resume


def extract_keywords(resume_text: str, jd_text: str, lexicon: Lexicon | None = None) -> KeywordSets:
    """Normalize and tokenize both texts, then align JD terms against the résumé."""
    lex = lexicon or get_default_lexicon()
    resume_tokens = tokenize(normalize(resume_text), lex)
    jd_tokens = tokenize(normalize(jd_text), lex)
    return match_keywords(
        extract_key_phrases(jd_tokens, lex),
        extract_key_phrases(resume_tokens, lex),
        to_base_set(jd_tokens),
        to_base_set(resume_tokens),
    )


def analyze(
    request: AnalysisRequest,
    *,
    lexicon: Lexicon | None = None,
    similarity_blend: bool | None = None,
) -> AnalysisResult:
    """Score a résumé against a job description.

    Matching and scoring always run on the unredacted text; redaction, when
    requested, is applied to the finished result only.
    """
    started_at = time.perf_counter()
    resume_text = request.resume_text
    hints = _resume_hints(request)

    keywords = extract_keywords(resume_text, request.jd_text, lexicon)
    matched_count = len(keywords.matched)
    missing_count = len(keywords.missing)

    keyword_score = score_keyword_coverage(matched_count, missing_count)
    blend = settings.keyword_similarity_blend if similarity_blend is None else similarity_blend
    if blend:
        coverage = matched_count / max(1, matched_count + missing_count) * 100
        keyword_score = blend_keyword_score(coverage, tfidf_cosine(resume_text, request.jd_text))

    ats_score = score_ats(resume_text, hints)
    impact_score = score_impact(resume_text, hints)
    clarity_score = score_clarity(resume_text)
    weights = request.weights
    overall = combine(
        [
            (ats_score, weights.ats),
            (keyword_score, weights.keyword_match),
            (impact_score, weights.impact),
            (clarity_score, weights.clarity),
        ]
    )

    flags = build_flags(resume_text, hints)
    result = AnalysisResult(
        scores=ScoreBundle(
            overall=overall,
            ats=ats_score,
            keyword_match=keyword_score,
            impact=impact_score,
            clarity=clarity_score,
        ),
        matched_keywords=list(keywords.matched),
        missing_keywords=list(keywords.missing),
        matched_count=matched_count,
        missing_count=missing_count,
        flags=flags,
        fix_list=build_fix_list(flags),
        suggested_rewrites=suggest_rewrites(resume_text),
        tailored_summary=build_summary(keyword_score, matched_count),
    )
    if request.redact:
        result = redact_result(result)

    logger.info(
        json.dumps(
            {
                "event": "analysis_complete",
                "resume_hash": _short_hash(resume_text),
                "jd_hash": _short_hash(request.jd_text),
                "resume_len": len(resume_text),
                "jd_len": len(request.jd_text),
                "has_hints": hints is not None,
                "redacted": request.redact,
                "similarity_blend": blend,
                "scores": result.scores.model_dump(),
                "matched": matched_count,
                "missing": missing_count,
                "flags": len(flags),
                "duration_ms": int((time.perf_counter() - started_at) * 1000),
            }
        )
    )
    return result
