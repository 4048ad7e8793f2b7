# ntrl_reader/services/__init__.py
"""
Content-neutralization services.
"""

from ntrl_reader.services.calm_summary import build_detail_summary, create_fallback_summary, make_calm_summary
from ntrl_reader.services.html_extractor import extract_main_text, extract_title
from ntrl_reader.services.quality_scorer import ArticleQuality, calculate_quality
from ntrl_reader.services.reader_mode import ReadableArticle, ReaderCache, ReaderModeService
from ntrl_reader.services.redline import RedlineSpan, SpanReason, detect_spans

__all__ = [
    "detect_spans",
    "RedlineSpan",
    "SpanReason",
    "extract_main_text",
    "extract_title",
    "calculate_quality",
    "ArticleQuality",
    "make_calm_summary",
    "create_fallback_summary",
    "build_detail_summary",
    "ReaderModeService",
    "ReaderCache",
    "ReadableArticle",
]
