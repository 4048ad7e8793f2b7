# ntrl_reader/services/html_extractor.py
"""
Main-content extraction from raw article HTML.

Tries several structural strategies, cleans each candidate block, scores it
with the shared quality heuristics plus a per-strategy bonus, and keeps the
best one:

1. <article> block
2. <main> block
3. Common CMS body containers, matched by class-name substring
4. All <p> blocks combined (fallback)

No DOM is built; everything is regex over the markup, so malformed pages
degrade to a weaker strategy instead of failing.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum

from ntrl_reader.constants import ExtractionLimits
from ntrl_reader.services.quality_scorer import score_text_block
from ntrl_reader.utils.boilerplate import remove_boilerplate
from ntrl_reader.utils.html_text import strip_html

logger = logging.getLogger(__name__)


class CandidateSource(str, Enum):
    """Which strategy produced a candidate."""
    ARTICLE = "article"
    MAIN = "main"
    CLASS = "class"
    PARAGRAPHS = "paragraphs"


@dataclass
class ExtractionCandidate:
    text: str
    score: float
    source: CandidateSource


ARTICLE_PATTERN = re.compile(r"<article[^>]*>(.*?)</article>", re.IGNORECASE | re.DOTALL)
MAIN_PATTERN = re.compile(r"<main[^>]*>(.*?)</main>", re.IGNORECASE | re.DOTALL)
PARAGRAPH_PATTERN = re.compile(r"<p[^>]*>.*?</p>", re.IGNORECASE | re.DOTALL)


def _class_container(class_fragment: str) -> re.Pattern:
    return re.compile(
        rf'<div[^>]*class="[^"]*{re.escape(class_fragment)}[^"]*"[^>]*>(.*?)</div>',
        re.IGNORECASE | re.DOTALL,
    )


# CMS body containers in priority order, with their static bonus
BODY_CLASS_PATTERNS = [
    (_class_container("article-body"), 12),
    (_class_container("story-body"), 12),
    (_class_container("post-content"), 10),
    (_class_container("entry-content"), 10),
    (_class_container("article-content"), 12),
    (_class_container("story-content"), 12),
    (_class_container("content"), 5),
]

OG_TITLE_PATTERN = re.compile(r'<meta[^>]*property="og:title"[^>]*content="([^"]+)"', re.IGNORECASE)
TITLE_PATTERN = re.compile(r"<title[^>]*>([^<]+)</title>", re.IGNORECASE)
H1_PATTERN = re.compile(r"<h1[^>]*>([^<]+)</h1>", re.IGNORECASE)


def clean_block(html_fragment: str) -> str:
    """Strip markup and drop boilerplate lines from one candidate block."""
    return remove_boilerplate(strip_html(html_fragment))


def _candidate(text: str, bonus: float, source: CandidateSource) -> ExtractionCandidate:
    return ExtractionCandidate(text=text, score=score_text_block(text) + bonus, source=source)


def collect_candidates(html: str) -> list[ExtractionCandidate]:
    """Run every strategy and return the usable candidates in strategy order."""
    candidates: list[ExtractionCandidate] = []

    article_match = ARTICLE_PATTERN.search(html)
    if article_match:
        text = clean_block(article_match.group(1))
        if len(text) > ExtractionLimits.MIN_TAG_BLOCK_CHARS:
            candidates.append(_candidate(text, ExtractionLimits.ARTICLE_BONUS, CandidateSource.ARTICLE))

    main_match = MAIN_PATTERN.search(html)
    if main_match:
        text = clean_block(main_match.group(1))
        if len(text) > ExtractionLimits.MIN_TAG_BLOCK_CHARS:
            candidates.append(_candidate(text, ExtractionLimits.MAIN_BONUS, CandidateSource.MAIN))

    for pattern, bonus in BODY_CLASS_PATTERNS:
        match = pattern.search(html)
        if match:
            text = clean_block(match.group(1))
            if len(text) > ExtractionLimits.MIN_CLASS_BLOCK_CHARS:
                candidates.append(_candidate(text, bonus, CandidateSource.CLASS))

    paragraphs = [strip_html(p) for p in PARAGRAPH_PATTERN.findall(html)]
    if paragraphs:
        combined = "\n\n".join(p for p in paragraphs if len(p) > ExtractionLimits.MIN_PARAGRAPH_CHARS)
        combined = remove_boilerplate(combined)
        if len(combined) > ExtractionLimits.MIN_PARAGRAPHS_TOTAL_CHARS:
            candidates.append(_candidate(combined, 0, CandidateSource.PARAGRAPHS))

    return candidates


def select_best_candidate(candidates: list[ExtractionCandidate]) -> ExtractionCandidate | None:
    """Highest score wins; the stable sort keeps strategy order on ties."""
    if not candidates:
        return None
    return sorted(candidates, key=lambda c: c.score, reverse=True)[0]


def extract_main_text(html: str | None) -> str:
    """
    Extract main article text from HTML.

    Returns:
        The best candidate's text, or "" if nothing usable was found
    """
    if not html:
        return ""

    best = select_best_candidate(collect_candidates(html))
    if best is None:
        logger.debug("[EXTRACTOR] No usable candidate found")
        return ""

    logger.debug(f"[EXTRACTOR] Best candidate: {best.source.value} score: {best.score:.1f}")
    return best.text


def extract_title(html: str | None) -> str | None:
    """Extract a title from og:title, <title>, or the first <h1>."""
    if not html:
        return None

    for pattern in (OG_TITLE_PATTERN, TITLE_PATTERN, H1_PATTERN):
        match = pattern.search(html)
        if match:
            return strip_html(match.group(1))

    return None
