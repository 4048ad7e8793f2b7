# ntrl_reader/utils/boilerplate.py
"""
Boilerplate filtering for extracted article text.

Removes navigation, CTA, and account-prompt lines that survive HTML
stripping, and measures how much CTA vocabulary remains in a block.
Runs after tag stripping and before candidate scoring.

Design constraints:
- Only whole lines are dropped, never parts of a line
- A line is dropped when it is short and is itself a boilerplate token,
  or when it has at most five words and half or more of them overlap
  a boilerplate token
"""

import logging
import re

logger = logging.getLogger(__name__)

# CTA / boilerplate tokens to filter and penalize
BOILERPLATE_TOKENS = [
    "share",
    "save",
    "subscribe",
    "watch",
    "listen",
    "sign up",
    "newsletter",
    "sponsored",
    "advertisement",
    "related",
    "continue reading",
    "read more",
    "see also",
    "follow us",
    "join now",
    "get started",
    "download",
    "install",
    "comments",
    "reply",
    "like",
    "tweet",
    "post",
    "privacy policy",
    "terms of service",
    "cookie",
    "skip to content",
    "skip to main",
    "menu",
    "navigation",
    "log in",
    "sign in",
    "register",
    "create account",
]

# Lines shorter than this are checked against the token list directly
SHORT_LINE_CHARS = 20
# Lines with at most this many words are checked for token overlap
SHORT_LINE_WORDS = 5
BOILERPLATE_WORD_RATIO = 0.5

_LINE_BREAKS = re.compile(r"\n+")
_WHITESPACE = re.compile(r"\s+")


def _token_pattern(token: str) -> re.Pattern:
    """Word-bounded pattern; multi-word tokens allow any whitespace run."""
    body = r"\s+".join(re.escape(part) for part in token.split())
    return re.compile(rf"\b{body}\b", re.IGNORECASE | re.ASCII)


_TOKEN_PATTERNS = [_token_pattern(token) for token in BOILERPLATE_TOKENS]


def split_words(text: str) -> list[str]:
    """Split on whitespace runs; an empty string yields one empty word."""
    return _WHITESPACE.split(text)


def _is_short_token_line(lower: str) -> bool:
    for token in BOILERPLATE_TOKENS:
        if lower == token or lower.startswith(token + " ") or lower.endswith(" " + token):
            return True
    return False


def _is_mostly_boilerplate(lower: str) -> bool:
    words = split_words(lower)
    if len(words) > SHORT_LINE_WORDS:
        return False
    boilerplate_count = sum(
        1 for word in words if any(token in word or word in token for token in BOILERPLATE_TOKENS)
    )
    return boilerplate_count >= len(words) * BOILERPLATE_WORD_RATIO


def is_boilerplate_line(line: str) -> bool:
    """Check if a single line is navigation/CTA boilerplate."""
    trimmed = line.strip()
    lower = trimmed.lower()

    if len(trimmed) < SHORT_LINE_CHARS and _is_short_token_line(lower):
        return True

    return _is_mostly_boilerplate(lower)


def remove_boilerplate(text: str | None) -> str:
    """
    Remove boilerplate/CTA lines from text.

    Args:
        text: Plain text, one paragraph per line (or a single line)

    Returns:
        Remaining lines joined with single newlines
    """
    if not text:
        return ""

    lines = _LINE_BREAKS.split(text)
    kept = [line for line in lines if not is_boilerplate_line(line)]

    removed = len(lines) - len(kept)
    if removed > 0:
        logger.debug(f"[BOILERPLATE] Removed {removed} of {len(lines)} lines")

    return "\n".join(kept)


def count_cta_tokens(text: str | None) -> int:
    """Count word-bounded boilerplate token occurrences in text."""
    if not text:
        return 0
    return sum(len(pattern.findall(text)) for pattern in _TOKEN_PATTERNS)
