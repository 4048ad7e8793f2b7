# ntrl_reader/services/calm_summary.py
"""
Calm summary generation from extracted article text.

Pipeline:
1. Split into sentences (abbreviation-safe) and drop fragments
2. Score each sentence for informativeness
3. Keep the best sentences, restored to document order
4. Neutralize sensational wording and punctuation
5. Group into 1-3 paragraphs

An empty result means "not enough material": callers fall back to
create_fallback_summary() or to the brief fields they already have.
"""

import logging
import re
from typing import Optional

from ntrl_reader.constants import SummaryLimits

logger = logging.getLogger(__name__)


# Words/phrases that mark a sentence as sensational
SENSATIONAL_WORDS = [
    "shocking",
    "stunning",
    "explosive",
    "bombshell",
    "devastating",
    "horrifying",
    "terrifying",
    "nightmare",
    "chaos",
    "crisis",
    "catastrophe",
    "disaster",
    "slams",
    "blasts",
    "destroys",
    "annihilates",
    "crushes",
    "eviscerates",
    "rips",
    "outrage",
    "fury",
    "backlash",
    "firestorm",
    "uproar",
    "unprecedented",
    "massive",
    "huge",
    "enormous",
    "incredible",
    "unbelievable",
    "breaking",
    "urgent",
    "must",
    "dangerously",
    "alarming",
]

# Filler phrases to avoid
FILLER_PHRASES = [
    "more detail may be available",
    "details available in the full article",
    "see full article for details",
    "additional context",
    "for more information",
]

# Calmer wording for every sensational word
NEUTRAL_REPLACEMENTS = {
    "slams": "criticizes",
    "blasts": "criticizes",
    "rips": "criticizes",
    "eviscerates": "criticizes",
    "destroys": "refutes",
    "annihilates": "defeats",
    "crushes": "defeats",
    "shocking": "notable",
    "stunning": "notable",
    "incredible": "notable",
    "explosive": "significant",
    "bombshell": "significant",
    "huge": "significant",
    "massive": "substantial",
    "enormous": "large",
    "crisis": "situation",
    "chaos": "disruption",
    "disaster": "incident",
    "catastrophe": "serious incident",
    "devastating": "serious",
    "horrifying": "serious",
    "terrifying": "concerning",
    "alarming": "concerning",
    "nightmare": "difficulty",
    "outrage": "criticism",
    "backlash": "criticism",
    "fury": "frustration",
    "firestorm": "controversy",
    "uproar": "debate",
    "unprecedented": "unusual",
    "unbelievable": "unexpected",
    "breaking": "developing",
    "urgent": "pressing",
    "must": "needs to",
    "dangerously": "highly",
}

SENSATIONAL_PREFIX = re.compile(r"^(Breaking|Urgent|Exclusive|Shocking|Just In):\s*", re.IGNORECASE)

# Stems that start contractions ("must've") and are left alone there
_CONTRACTION_STEMS = {"must"}


def _word_pattern(word: str) -> re.Pattern:
    suffix = r"(?!['’])" if word in _CONTRACTION_STEMS else ""
    return re.compile(rf"\b{re.escape(word)}\b{suffix}", re.IGNORECASE)


_REPLACEMENT_PATTERNS = [
    (_word_pattern(word), replacement)
    for word, replacement in NEUTRAL_REPLACEMENTS.items()
]
_SENSATIONAL_PATTERNS = [_word_pattern(word) for word in SENSATIONAL_WORDS]

_REPEATED_EXCLAMATION = re.compile(r"!{2,}")
_REPEATED_QUESTION = re.compile(r"\?{2,}")
_ELLIPSIS = re.compile(r"\.{3,}")

# Abbreviations whose periods must not end a sentence
ABBREVIATIONS = [
    "Mr.", "Mrs.", "Ms.", "Dr.", "Prof.", "Sr.", "Jr.", "St.",
    "U.S.", "U.K.", "U.N.", "E.U.",
    "Inc.", "Ltd.", "Corp.", "Co.",
    "Gov.", "Sen.", "Rep.", "Gen.", "Lt.", "Col.", "Sgt.", "Capt.",
    "vs.", "etc.", "e.g.", "i.e.",
    "Jan.", "Feb.", "Aug.", "Sept.", "Oct.", "Nov.", "Dec.",
    "No.",
]

# Private-use character standing in for a protected period
_PERIOD_PLACEHOLDER = "\ue000"

# Longest first so "Corp." is tried before "Co."
_ABBREVIATION_PATTERN = re.compile(
    r"(?<![A-Za-z])(?:"
    + "|".join(re.escape(a) for a in sorted(ABBREVIATIONS, key=len, reverse=True))
    + ")"
)

# Terminator (optionally followed by a closing quote/bracket), then whitespace
_SENTENCE_BREAK = re.compile(r"(?<=[.!?])\s+|(?<=[.!?][\"'”’)])\s+")
_WHITESPACE = re.compile(r"\s+")

# Sentence scoring signals
_DIGIT = re.compile(r"\d")
_QUOTE_MARK = re.compile(r"[\"“”]")
_ATTRIBUTION = re.compile(
    r"\b(said|says|told|according to|announced|reported|stated|confirmed|testified)\b",
    re.IGNORECASE,
)
_DATE = re.compile(
    r"\b(Monday|Tuesday|Wednesday|Thursday|Friday|Saturday|Sunday|"
    r"January|February|March|April|May|June|July|August|September|October|November|December|"
    r"yesterday|today|tomorrow|(?:19|20)\d{2})\b"
)
_QUANTITY = re.compile(
    r"(\$\s?\d|\b\d[\d,.]*\s*(%|percent|million|billion|trillion|thousand|hundred|people|years?|months?|days?)\b)",
    re.IGNORECASE,
)
_INSTITUTION = re.compile(
    r"\b(government|court|police|company|officials?|ministry|department|president|minister|"
    r"council|university|agency|committee|parliament|congress|senate|researchers?)\b",
    re.IGNORECASE,
)
_LEADING_CONJUNCTION = re.compile(r"^(But|And|So|Or)\b")


# -----------------------------------------------------------------------------
# Neutralization
# -----------------------------------------------------------------------------


def _match_case(replacement: str):
    def _sub(match: re.Match) -> str:
        if match.group(0)[0].isupper():
            return replacement[0].upper() + replacement[1:]
        return replacement
    return _sub


def neutralize_sentence(sentence: str) -> str:
    """Remove sensational prefixes, tone down wording, collapse punctuation."""
    result = SENSATIONAL_PREFIX.sub("", sentence)

    for pattern, replacement in _REPLACEMENT_PATTERNS:
        result = pattern.sub(_match_case(replacement), result)

    result = _REPEATED_EXCLAMATION.sub(".", result)
    result = _REPEATED_QUESTION.sub("?", result)
    result = _ELLIPSIS.sub(".", result)

    return result.strip()


def contains_filler(text: str) -> bool:
    lower = text.lower()
    return any(phrase in lower for phrase in FILLER_PHRASES)


# -----------------------------------------------------------------------------
# Sentence splitting and scoring
# -----------------------------------------------------------------------------


def split_sentences(text: str) -> list[str]:
    """
    Split text into sentences of at least MIN_SENTENCE_CHARS characters.

    Abbreviation periods are swapped for a placeholder before splitting and
    restored afterwards.
    """
    protected = _ABBREVIATION_PATTERN.sub(lambda m: m.group(0).replace(".", _PERIOD_PLACEHOLDER), text)

    sentences = []
    for raw in _SENTENCE_BREAK.split(protected):
        sentence = _WHITESPACE.sub(" ", raw.replace(_PERIOD_PLACEHOLDER, ".")).strip()
        if len(sentence) >= SummaryLimits.MIN_SENTENCE_CHARS:
            sentences.append(sentence)
    return sentences


def _length_score(length: int) -> float:
    if SummaryLimits.IDEAL_SENTENCE_MIN_CHARS <= length <= SummaryLimits.IDEAL_SENTENCE_MAX_CHARS:
        return 3.0
    if 30 <= length < SummaryLimits.IDEAL_SENTENCE_MIN_CHARS or SummaryLimits.IDEAL_SENTENCE_MAX_CHARS < length <= 250:
        return 1.0
    if length < 30:
        return -1.0
    return -2.0


def _position_score(index: int, total: int) -> float:
    if index == 0:
        return 4.0
    score = 0.0
    if index <= 2:
        score = 2.0
    elif index <= 4:
        score = 1.0
    if index >= total - 2:
        score += 1.0
    return score


def score_sentence(sentence: str, index: int, total: int) -> float:
    """Score a sentence for informativeness. Higher = more valuable."""
    score = _length_score(len(sentence)) + _position_score(index, total)

    if _DIGIT.search(sentence):
        score += 2.0
    if _QUOTE_MARK.search(sentence):
        score += 1.5
    if _ATTRIBUTION.search(sentence):
        score += 2.0
    if _DATE.search(sentence):
        score += 1.5
    if _QUANTITY.search(sentence):
        score += 1.5
    if _INSTITUTION.search(sentence):
        score += 1.0

    score -= 2.0 * sum(len(p.findall(sentence)) for p in _SENSATIONAL_PATTERNS)

    lower = sentence.lower()
    score -= 6.0 * sum(1 for phrase in FILLER_PHRASES if phrase in lower)

    if sentence.rstrip().endswith("?"):
        score -= 3.0
    if _LEADING_CONJUNCTION.match(sentence):
        score -= 2.0

    return score


def select_sentences(sentences: list[str]) -> list[str]:
    """Keep the best-scoring sentences, returned in document order."""
    total = len(sentences)
    scored = [
        (index, score_sentence(sentence, index, total))
        for index, sentence in enumerate(sentences)
    ]
    kept = [(index, score) for index, score in scored if score > SummaryLimits.MIN_SCORE]
    best = sorted(kept, key=lambda item: item[1], reverse=True)[: SummaryLimits.MAX_SENTENCES]
    return [sentences[index] for index, _ in sorted(best)]


def group_paragraphs(sentences: list[str]) -> list[str]:
    """Group sentences into 1 (<=4), 2 (5-7) or 3 (8+) paragraphs."""
    count = len(sentences)
    if count == 0:
        return []
    if count <= 4:
        groups = [sentences]
    elif count <= 7:
        half = (count + 1) // 2
        groups = [sentences[:half], sentences[half:]]
    else:
        third = count // 3
        groups = [sentences[:third], sentences[third:2 * third], sentences[2 * third:]]
    return [" ".join(group) for group in groups if group]


# -----------------------------------------------------------------------------
# Public API
# -----------------------------------------------------------------------------


def make_calm_summary(text: Optional[str]) -> list[str]:
    """
    Build a calm 1-3 paragraph summary from article text.

    Returns:
        Paragraphs, or [] when the text is too short or too thin to summarize
    """
    if not text or len(text) < SummaryLimits.MIN_INPUT_CHARS:
        return []

    sentences = split_sentences(text)
    if len(sentences) < SummaryLimits.MIN_SENTENCES:
        logger.debug(f"[CALM_SUMMARY] Only {len(sentences)} sentences, need {SummaryLimits.MIN_SENTENCES}")
        return []

    selected = select_sentences(sentences)
    if len(selected) < SummaryLimits.MIN_SENTENCES:
        logger.debug(f"[CALM_SUMMARY] Only {len(selected)} sentences passed scoring")
        return []

    neutral = [s for s in (neutralize_sentence(sentence) for sentence in selected) if s]
    paragraphs = group_paragraphs(neutral)

    if sum(len(p) for p in paragraphs) < SummaryLimits.MIN_OUTPUT_CHARS:
        return []

    return paragraphs


def _lead_sentences(text: str, count: int) -> str:
    sentences = re.findall(r"[^.!?]+[.!?]+", text)
    return "".join(sentences[:count]).strip()


def create_fallback_summary(
    what_happened: Optional[str],
    why_it_matters: Optional[str] = None,
    full_text: Optional[str] = None,
) -> list[str]:
    """
    Create a single-paragraph summary from short brief fields.

    Each field is neutralized and skipped if it is too short or is filler.
    When no field survives, the first sentences of full_text are used.
    """
    parts = []
    for field in (what_happened, why_it_matters):
        if not field:
            continue
        cleaned = neutralize_sentence(field)
        if len(cleaned) >= SummaryLimits.MIN_FALLBACK_FIELD_CHARS and not contains_filler(cleaned):
            parts.append(cleaned)

    if not parts and full_text:
        lead = _lead_sentences(full_text, SummaryLimits.FALLBACK_LEAD_SENTENCES)
        if len(lead) >= SummaryLimits.MIN_FALLBACK_FIELD_CHARS:
            cleaned = neutralize_sentence(lead)
            if not contains_filler(cleaned):
                parts.append(cleaned)

    if parts:
        return [" ".join(parts)]
    return []


def build_detail_summary(
    text: Optional[str],
    what_happened: Optional[str] = None,
    why_it_matters: Optional[str] = None,
) -> list[str]:
    """Calm summary of the full text, or the brief-field fallback."""
    paragraphs = make_calm_summary(text)
    if paragraphs:
        return paragraphs
    return create_fallback_summary(what_happened, why_it_matters, full_text=text)
