# ntrl_reader/services/redline/__init__.py
"""
Redline: manipulative language highlighting for the transparency view.

Usage:
    from ntrl_reader.services.redline import detect_spans

    spans = detect_spans("BREAKING: Senator slams critics!!")
    for span in spans:
        print(span.start, span.end, span.reason)
"""

from .detector import (
    RedlineDetector,
    detect_spans,
    get_detected_phrases,
    get_redline_detector,
    has_manipulative_language,
    merge_overlapping_spans,
)
from .phrases import ACRONYM_ALLOWLIST, MANIPULATIVE_PHRASES, PROMOTIONAL_PHRASES
from .types import REASON_SEPARATOR, RedlineSpan, SpanReason

__all__ = [
    # Types
    "RedlineSpan",
    "SpanReason",
    "REASON_SEPARATOR",
    # Phrase data
    "MANIPULATIVE_PHRASES",
    "PROMOTIONAL_PHRASES",
    "ACRONYM_ALLOWLIST",
    # Detector
    "RedlineDetector",
    "get_redline_detector",
    "merge_overlapping_spans",
    "detect_spans",
    "get_detected_phrases",
    "has_manipulative_language",
]
