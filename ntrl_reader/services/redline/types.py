# ntrl_reader/services/redline/types.py
"""
Data types for redline (manipulative language) detection.
"""

from dataclasses import dataclass
from enum import Enum


class SpanReason(str, Enum):
    """Why a span was highlighted."""
    MANIPULATIVE_LANGUAGE = "manipulative_language"
    PROMOTIONAL_CONTENT = "promotional_content"
    EMPHATIC_CAPITALIZATION = "emphatic_capitalization"
    EXCESSIVE_PUNCTUATION = "excessive_punctuation"


# Separator used when a merged span exposes several reasons as one label
REASON_SEPARATOR = ", "


@dataclass(frozen=True)
class RedlineSpan:
    """
    A highlighted region of a specific input string.

    Attributes:
        start: Character offset of the first highlighted character
        end: Character offset one past the last highlighted character
        text: The flagged text (for merged spans, the longer contributor)
        reasons: Contributing reasons, in the order they were merged in
    """
    start: int
    end: int
    text: str
    reasons: tuple[SpanReason, ...]

    @property
    def reason(self) -> str:
        """Joined label of all contributing reasons."""
        return REASON_SEPARATOR.join(r.value for r in self.reasons)

    @property
    def length(self) -> int:
        return self.end - self.start

    def has_reason(self, reason: SpanReason) -> bool:
        return reason in self.reasons

    def merge(self, other: "RedlineSpan") -> "RedlineSpan":
        """Combine with an overlapping span that starts at or after this one."""
        reasons = self.reasons + tuple(r for r in other.reasons if r not in self.reasons)
        return RedlineSpan(
            start=self.start,
            end=max(self.end, other.end),
            text=self.text if len(self.text) > len(other.text) else other.text,
            reasons=reasons,
        )

    def to_dict(self) -> dict:
        """Serialize for the UI layer."""
        return {
            "start": self.start,
            "end": self.end,
            "text": self.text,
            "reason": self.reason,
            "reasons": [r.value for r in self.reasons],
        }
