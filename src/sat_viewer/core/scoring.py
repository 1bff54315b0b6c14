"""SAT score quality classification.

Each subject average is bucketed into one of three tiers using fixed
thresholds on the 200-800 SAT section scale:

    score <= 450          -> LOW     (red)
    450 < score <= 650    -> MEDIUM  (yellow)
    score > 650           -> HIGH    (green)
"""

from __future__ import annotations

from enum import Enum

AVERAGE_SCORE_THRESHOLD = 450
GOOD_SCORE_THRESHOLD = 650


class QualityTier(str, Enum):
    """How well a school did in one SAT section."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def color(self) -> str:
        return TIER_COLORS[self]

    @property
    def label(self) -> str:
        return self.value.capitalize()


TIER_COLORS: dict[QualityTier, str] = {
    QualityTier.LOW: "red",
    QualityTier.MEDIUM: "yellow",
    QualityTier.HIGH: "green",
}


def classify_score(score: int) -> QualityTier:
    """Classify a subject average. Defined for every integer."""
    if score > GOOD_SCORE_THRESHOLD:
        return QualityTier.HIGH
    if score > AVERAGE_SCORE_THRESHOLD:
        return QualityTier.MEDIUM
    return QualityTier.LOW
