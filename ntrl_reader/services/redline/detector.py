# ntrl_reader/services/redline/detector.py
"""
Redline Detector: pattern-based manipulative language detection.

Scans display text for sensational and promotional phrases, ALL-CAPS
emphasis, and excessive punctuation, then merges the raw matches into a
sorted, non-overlapping span list the UI can overlay by offset.

Key features:
- Whole-phrase matching: "break" never matches inside "breakthrough"
- Pattern caching: phrase patterns are compiled once per detector
- Offsets always index the exact string that was scanned
"""

import re
from functools import lru_cache
from typing import Iterable, Optional

from .phrases import ACRONYM_ALLOWLIST, MANIPULATIVE_PHRASES, PROMOTIONAL_PHRASES
from .types import RedlineSpan, SpanReason

# A phrase must not touch a word character on either side
_WORD_CHAR = "A-Za-z0-9_"

ALL_CAPS_PATTERN = re.compile(r"\b[A-Z]{4,}\b", re.ASCII)
EXCESSIVE_PUNCTUATION_PATTERN = re.compile(r"[!?]{2,}")


def compile_phrase(phrase: str) -> re.Pattern:
    """Compile a case-insensitive, word-bounded pattern for a literal phrase."""
    return re.compile(
        rf"(?<![{_WORD_CHAR}]){re.escape(phrase)}(?![{_WORD_CHAR}])",
        re.IGNORECASE,
    )


def merge_overlapping_spans(spans: Iterable[RedlineSpan]) -> list[RedlineSpan]:
    """
    Merge overlapping or touching spans.

    Spans are stably sorted by start; a span whose start falls at or before
    the end of the previous merged span is folded into it.
    """
    ordered = sorted(spans, key=lambda s: s.start)
    if not ordered:
        return []

    merged = [ordered[0]]
    for current in ordered[1:]:
        last = merged[-1]
        if current.start <= last.end:
            merged[-1] = last.merge(current)
        else:
            merged.append(current)
    return merged


class RedlineDetector:
    """
    Fast pattern matching for manipulative and promotional language.

    Stateless after construction, so one instance can be shared freely.
    """

    def __init__(
        self,
        manipulative_phrases: Optional[list[str]] = None,
        promotional_phrases: Optional[list[str]] = None,
        acronyms: Optional[frozenset[str]] = None,
    ):
        """Initialize detector with compiled phrase patterns."""
        self._acronyms = ACRONYM_ALLOWLIST if acronyms is None else acronyms
        self._phrase_patterns: list[tuple[re.Pattern, SpanReason]] = []
        self._compile_patterns(
            MANIPULATIVE_PHRASES if manipulative_phrases is None else manipulative_phrases,
            SpanReason.MANIPULATIVE_LANGUAGE,
        )
        self._compile_patterns(
            PROMOTIONAL_PHRASES if promotional_phrases is None else promotional_phrases,
            SpanReason.PROMOTIONAL_CONTENT,
        )

    def _compile_patterns(self, phrases: list[str], reason: SpanReason) -> None:
        for phrase in phrases:
            self._phrase_patterns.append((compile_phrase(phrase), reason))

    @staticmethod
    def _find_phrase_matches(pattern: re.Pattern, text: str, reason: SpanReason) -> list[RedlineSpan]:
        """Find every bounded occurrence, resuming one character after each hit."""
        matches = []
        pos = 0
        while pos < len(text):
            match = pattern.search(text, pos)
            if match is None:
                break
            matches.append(RedlineSpan(match.start(), match.end(), match.group(), (reason,)))
            pos = match.start() + 1
        return matches

    def _find_all_caps(self, text: str) -> list[RedlineSpan]:
        """ALL-CAPS words of 4+ letters that aren't known acronyms."""
        return [
            RedlineSpan(m.start(), m.end(), m.group(), (SpanReason.EMPHATIC_CAPITALIZATION,))
            for m in ALL_CAPS_PATTERN.finditer(text)
            if m.group() not in self._acronyms
        ]

    @staticmethod
    def _find_excessive_punctuation(text: str) -> list[RedlineSpan]:
        """Runs of two or more ! / ? characters."""
        return [
            RedlineSpan(m.start(), m.end(), m.group(), (SpanReason.EXCESSIVE_PUNCTUATION,))
            for m in EXCESSIVE_PUNCTUATION_PATTERN.finditer(text)
        ]

    def detect(self, text: Optional[str]) -> list[RedlineSpan]:
        """
        Detect redline spans in text.

        Args:
            text: The exact string the highlights will be overlaid on

        Returns:
            Spans sorted by start, mutually non-overlapping. Empty for
            None or empty input.
        """
        if not text:
            return []

        spans: list[RedlineSpan] = []
        for pattern, reason in self._phrase_patterns:
            spans.extend(self._find_phrase_matches(pattern, text, reason))
        spans.extend(self._find_all_caps(text))
        spans.extend(self._find_excessive_punctuation(text))

        return merge_overlapping_spans(spans)

    def get_detected_phrases(self, text: Optional[str]) -> list[str]:
        """Lower-cased flagged texts, de-duplicated in first-seen order."""
        return list(dict.fromkeys(span.text.lower() for span in self.detect(text)))

    def has_manipulative_language(self, text: Optional[str]) -> bool:
        return len(self.detect(text)) > 0

    @property
    def pattern_count(self) -> int:
        """Total number of compiled phrase patterns."""
        return len(self._phrase_patterns)


@lru_cache(maxsize=1)
def get_redline_detector() -> RedlineDetector:
    """Get or create the singleton redline detector instance."""
    return RedlineDetector()


def detect_spans(text: Optional[str]) -> list[RedlineSpan]:
    """Find all redline spans in text using the shared detector."""
    return get_redline_detector().detect(text)


def get_detected_phrases(text: Optional[str]) -> list[str]:
    """Unique lower-cased phrases flagged in text (for display)."""
    return get_redline_detector().get_detected_phrases(text)


def has_manipulative_language(text: Optional[str]) -> bool:
    """Check if text contains any redline span."""
    return get_redline_detector().has_manipulative_language(text)
