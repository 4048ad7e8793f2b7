# ntrl_reader/services/quality_scorer.py
"""
Heuristic quality scoring for extracted article text.

Two related measurements live here:
- calculate_quality(): objective metrics deciding whether a text block is
  adequate input for the calm summarizer.
- score_text_block(): a relative score used by the HTML extractor to pick
  the candidate block most likely to be the article body.

Both are pure functions of their input text.
"""

import re
from collections import Counter
from dataclasses import dataclass

from ntrl_reader.constants import QualityThresholds
from ntrl_reader.utils.boilerplate import count_cta_tokens, split_words

# A run of terminators followed by whitespace or end of text
SENTENCE_END_PATTERN = re.compile(r"[.!?]+(?:\s|$)")

# Substrings that hint at page chrome rather than article prose
NAV_WORDS = [
    "menu",
    "navigation",
    "subscribe",
    "sign up",
    "log in",
    "cookie",
    "footer",
    "header",
    "sidebar",
]

# Repeated-phrase (spam) detection
REPEAT_NGRAM_SIZE = 3
REPEAT_MIN_WORDS = 10
REPEAT_MAX_OCCURRENCES = 3


@dataclass(frozen=True)
class ArticleQuality:
    """Objective metrics for a text block."""
    char_count: int
    sentence_count: int
    ok_for_summary: bool

    def to_dict(self) -> dict:
        return {
            "char_count": self.char_count,
            "sentence_count": self.sentence_count,
            "ok_for_summary": self.ok_for_summary,
        }


def count_sentences(text: str) -> int:
    """Count sentence terminators followed by whitespace or end of text."""
    return len(SENTENCE_END_PATTERN.findall(text))


def count_words(text: str) -> int:
    return len(split_words(text))


def cta_density(text: str) -> float:
    """Boilerplate token occurrences per word."""
    return count_cta_tokens(text) / max(count_words(text), 1)


def has_repeated_phrases(text: str) -> bool:
    """Detect any 3-word sequence repeated more than three times."""
    words = split_words(text.lower())
    if len(words) < REPEAT_MIN_WORDS:
        return False

    sequences = Counter(
        " ".join(words[i:i + REPEAT_NGRAM_SIZE])
        for i in range(len(words) - REPEAT_NGRAM_SIZE + 1)
    )
    return any(count > REPEAT_MAX_OCCURRENCES for count in sequences.values())


def score_text_block(text: str) -> float:
    """
    Score a text block by quality indicators.

    Higher score = more likely to be article content.
    """
    score = 0.0
    length = len(text)
    word_count = count_words(text)
    sentence_count = count_sentences(text)
    cta_count = count_cta_tokens(text)

    # Length bonus (prefer longer content, cap at 25)
    score += min(length / 100, 25)

    # Sentence count bonus (cap at 25)
    score += min(sentence_count * 2.5, 25)

    # Paragraph-like structure bonus
    if sentence_count >= 3:
        score += 10
    if sentence_count >= 8:
        score += 10

    # Too short
    if length < 200:
        score -= 25
    if length < 100:
        score -= 25

    # Words per sentence too high = run-on or junk
    sentence_density = word_count / max(sentence_count, 1)
    if sentence_density > 50:
        score -= 15
    if sentence_density > 100:
        score -= 20

    # CTA-heavy blocks
    density = cta_count / max(word_count, 1)
    if density > 0.05:
        score -= 20
    if density > 0.1:
        score -= 30

    if has_repeated_phrases(text):
        score -= 25

    lower = text.lower()
    for word in NAV_WORDS:
        if word in lower:
            score -= 3

    return score


def calculate_quality(text: str | None) -> ArticleQuality:
    """
    Calculate quality metrics for extracted text.

    ok_for_summary requires enough characters, enough sentences, and a low
    CTA density; the thresholds are fixed policy.
    """
    text = text or ""
    char_count = len(text)
    sentence_count = count_sentences(text)

    ok_for_summary = (
        char_count >= QualityThresholds.MIN_CHARS_FOR_SUMMARY
        and sentence_count >= QualityThresholds.MIN_SENTENCES_FOR_SUMMARY
        and cta_density(text) <= QualityThresholds.MAX_CTA_DENSITY_FOR_SUMMARY
    )

    return ArticleQuality(
        char_count=char_count,
        sentence_count=sentence_count,
        ok_for_summary=ok_for_summary,
    )
