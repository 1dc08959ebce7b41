"""Tests for ATS scoring and score tiers."""

import pytest

from resume_customizer.matcher import (
    GOOD,
    LOW,
    MEDIUM,
    NEUTRAL,
    calculate_ats_score,
    score_tier,
)


def test_score_is_rounded_percentage():
    score = calculate_ats_score(["Java", "Spring Boot"], ["Java", "Spring Boot", "Microservices"])
    assert score == 67
    assert score_tier(score) is MEDIUM


def test_empty_job_keywords_scores_zero():
    score = calculate_ats_score(["Java"], [])
    assert score == 0
    assert score_tier(score) is NEUTRAL


@pytest.mark.parametrize(
    "matched, total, expected",
    [
        (0, 4, 0),
        (1, 8, 13),  # half rounds up
        (1, 3, 33),
        (3, 4, 75),
        (4, 4, 100),
    ],
)
def test_score_matches_ratio(matched, total, expected):
    assert calculate_ats_score(["k"] * matched, ["k"] * total) == expected


@pytest.mark.parametrize(
    "score, tier",
    [(100, GOOD), (80, GOOD), (79, MEDIUM), (50, MEDIUM), (49, LOW), (1, LOW), (0, NEUTRAL)],
)
def test_tier_boundaries(score, tier):
    assert score_tier(score) is tier


def test_tier_colors():
    assert GOOD.color == "#50C878"
    assert MEDIUM.color == "#FFD700"
    assert LOW.color == "#E57373"
    assert NEUTRAL.color == "#CED9E7"
