from .flags import FLAG_RULES, build_fix_list, build_flags
from .phrases import extract_key_phrases
from .rewrites import rewrite_line, suggest_rewrites
from .summary import alignment_label, build_summary

__all__ = [
    "FLAG_RULES",
    "build_flags",
    "build_fix_list",
    "extract_key_phrases",
    "rewrite_line",
    "suggest_rewrites",
    "alignment_label",
    "build_summary",
]
