"""
ATS keyword scoring.
Scores the matched keyword set against the job's keyword set.
"""

import math
from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class ScoreTier:
    """Color and label used to display a score."""
    name: str
    color: str
    message: str


GOOD = ScoreTier("good", "#50C878", "Excellent match!")
MEDIUM = ScoreTier("medium", "#FFD700", "Good, but can improve!")
LOW = ScoreTier("low", "#E57373", "Low match. Add more relevant keywords.")
NEUTRAL = ScoreTier("neutral", "#CED9E7", "No match detected.")


def calculate_ats_score(matched_keywords: Sequence[str], job_keywords: Sequence[str]) -> int:
    """Percentage of job keywords found in the matched set, 0 when the job has none."""
    if not job_keywords:
        return 0
    ratio = len(matched_keywords) / len(job_keywords)
    # Half-up rounding; round() would send 12.5 to 12
    return int(math.floor(ratio * 100 + 0.5))


def score_tier(score: int) -> ScoreTier:
    if score >= 80:
        return GOOD
    if score >= 50:
        return MEDIUM
    if score > 0:
        return LOW
    return NEUTRAL
