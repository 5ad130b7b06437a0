from __future__ import annotations

from sklearn.feature_extraction.text import TfidfVectorizer
from sklearn.metrics.pairwise import cosine_similarity

_TOKEN_PATTERN = r"[a-z0-9.+#-]{2,}"
_STOPWORDS = (
    "an", "and", "are", "as", "at", "be", "by", "for", "from", "has", "he", "in", "is",
    "it", "its", "of", "on", "that", "the", "to", "was", "were", "will", "with", "this",
    "you", "your", "we", "our", "they", "their", "them", "or", "but", "if", "than",
    "then", "so", "such", "these", "those", "over", "under", "into", "out", "about",
    "up", "down", "not",
)


def _vectorizer() -> TfidfVectorizer:
    # smooth_idf over the two-document corpus: ln(3 / (df + 1)) + 1
    return TfidfVectorizer(
        lowercase=True,
        token_pattern=_TOKEN_PATTERN,
        stop_words=list(_STOPWORDS),
        smooth_idf=True,
        norm="l2",
    )


def tfidf_cosine(left: str, right: str) -> float:
    """TF-IDF cosine similarity of two documents on a 0..100 scale."""
    vectorizer = _vectorizer()
    analyzer = vectorizer.build_analyzer()
    if not analyzer(left or "") or not analyzer(right or ""):
        return 0.0

    matrix = vectorizer.fit_transform([left, right])
    return float(cosine_similarity(matrix[0:1], matrix[1:2])[0][0]) * 100
