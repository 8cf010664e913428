from __future__ import annotations

import bisect

from cgpacalc.domain.errors import OutOfRange
from cgpacalc.domain.models.entities import GradeBand, GradeResult

MIN_MARKS = 0
MAX_MARKS = 100

GRADE_SCALE: tuple[GradeBand, ...] = (
    GradeBand(90, 100, "A+", 4.00),
    GradeBand(85, 89, "A", 3.75),
    GradeBand(80, 84, "B+", 3.50),
    GradeBand(75, 79, "B", 3.25),
    GradeBand(70, 74, "C+", 3.00),
    GradeBand(65, 69, "C", 2.75),
    GradeBand(60, 64, "D+", 2.50),
    GradeBand(50, 59, "D", 2.25),
    GradeBand(0, 49, "F", 0.00),
)

FALLBACK_GRADE = GradeResult("F", 0.00)

# Ascending minimums for the floor search; index i maps to _ASCENDING[i].
_ASCENDING: tuple[GradeBand, ...] = tuple(sorted(GRADE_SCALE, key=lambda band: band.min_mark))
_MINIMUMS: tuple[int, ...] = tuple(band.min_mark for band in _ASCENDING)


def grade_for(marks: float) -> GradeResult:
    """Resolve marks out of 100 to a letter grade and grade point.

    Fractional marks are truncated before the lookup, so 89.5 is still an A.
    Raises OutOfRange for marks below 0 or above 100.
    """
    if not MIN_MARKS <= marks <= MAX_MARKS:
        raise OutOfRange("Marks", marks, MIN_MARKS, MAX_MARKS)

    index = bisect.bisect_right(_MINIMUMS, int(marks)) - 1
    if index < 0:
        return FALLBACK_GRADE
    band = _ASCENDING[index]
    return GradeResult(band.letter, band.point)


def band_for(letter: str) -> GradeBand:
    for band in GRADE_SCALE:
        if band.letter == letter.strip().upper():
            return band
    raise KeyError(f"Unsupported letter grade: {letter}")
