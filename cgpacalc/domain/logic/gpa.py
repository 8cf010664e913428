from __future__ import annotations

import logging
from typing import Iterable

from cgpacalc.domain.errors import InvalidArgument, OutOfRange
from cgpacalc.domain.logic.grading import grade_for
from cgpacalc.domain.models.entities import MAX_CGPA, MIN_CGPA, AggregateResult, Course

logger = logging.getLogger(__name__)


def semester_gpa(courses: Iterable[Course]) -> float:
    """Credit-weighted average grade point of one semester's courses."""
    weighted = 0.0
    credits_sum = 0
    for c in courses:
        if c.credits <= 0:
            logger.debug("Skipping %r: credits must be positive", c.title)
            continue
        weighted += grade_for(c.marks).point * c.credits
        credits_sum += c.credits
    if credits_sum <= 0:
        return 0.0
    return weighted / credits_sum


def total_credits(courses: Iterable[Course]) -> int:
    return sum(c.credits for c in courses if c.credits > 0)


def cumulative_cgpa(
    prev_cgpa: float,
    prev_credits: int,
    current_gpa: float,
    current_credits: int,
) -> float:
    """Blend a previous CGPA with a semester GPA, weighted by credits.

    New CGPA = (prev CGPA * prev credits + current GPA * current credits) / total credits

    The result is not rounded. current_gpa is taken as given.
    """
    if prev_credits < 0 or current_credits < 0:
        raise InvalidArgument("Credits cannot be negative")
    if not MIN_CGPA <= prev_cgpa <= MAX_CGPA:
        raise OutOfRange("CGPA", prev_cgpa, MIN_CGPA, MAX_CGPA)

    weighted = prev_cgpa * prev_credits + current_gpa * current_credits
    credits_sum = prev_credits + current_credits
    if credits_sum <= 0:
        return 0.0
    return weighted / credits_sum


def aggregate(
    courses: Iterable[Course],
    prev_cgpa: float = 0.0,
    prev_credits: int = 0,
) -> AggregateResult:
    courses = list(courses)
    gpa = semester_gpa(courses)
    current_credits = total_credits(courses)
    cgpa = cumulative_cgpa(prev_cgpa, prev_credits, gpa, current_credits)
    logger.debug(
        "Aggregated %d course(s): semester=%.4f cumulative=%.4f",
        len(courses),
        gpa,
        cgpa,
    )
    return AggregateResult(
        semester_gpa=gpa,
        cumulative_cgpa=cgpa,
        total_credits=prev_credits + current_credits,
    )
