# ntrl_reader/constants.py
"""
Centralized magic constants organized by domain.

These are product policy, not tuning knobs: callers never override them
per request. Runtime-tunable values (timeouts, cache sizing) live in
ntrl_reader.config instead.
"""


class ReaderLimits:
    """Thresholds applied by the reader-mode orchestrator."""

    MIN_EXTRACTED_CHARS = 600           # Extraction below this is a miss
    MIN_FALLBACK_CHARS = 100            # Caller fallback text must reach this
    CACHE_TTL_SECONDS = 6 * 60 * 60     # 6 hours
    FETCH_TIMEOUT_SECONDS = 12.0
    ACCEPT_HEADER = "text/html,application/xhtml+xml"
    MAX_REDIRECTS = 3                   # Every hop is re-validated
    USER_AGENT = "Mozilla/5.0 (compatible; NTRL/1.0; +https://ntrl.app)"


class QualityThresholds:
    """Gates for deciding whether extracted text can be summarized."""

    MIN_CHARS_FOR_SUMMARY = 900
    MIN_SENTENCES_FOR_SUMMARY = 8
    MAX_CTA_DENSITY_FOR_SUMMARY = 0.02  # 2% of words


class ExtractionLimits:
    """Minimum candidate sizes per extraction strategy."""

    MIN_TAG_BLOCK_CHARS = 100           # <article> / <main>
    MIN_CLASS_BLOCK_CHARS = 200         # CMS body containers
    MIN_PARAGRAPH_CHARS = 50            # Single <p> kept for the fallback
    MIN_PARAGRAPHS_TOTAL_CHARS = 300    # Combined <p> fallback

    ARTICLE_BONUS = 20
    MAIN_BONUS = 15


class SummaryLimits:
    """Calm summary sizing."""

    MIN_INPUT_CHARS = 300
    MIN_SENTENCE_CHARS = 25
    MIN_SENTENCES = 4
    MAX_SENTENCES = 10
    MIN_SCORE = -5.0
    MIN_OUTPUT_CHARS = 200
    MIN_FALLBACK_FIELD_CHARS = 30
    FALLBACK_LEAD_SENTENCES = 3

    IDEAL_SENTENCE_MIN_CHARS = 50
    IDEAL_SENTENCE_MAX_CHARS = 180
