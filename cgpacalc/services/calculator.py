"""Form-facing calculator service.

Takes the raw values typed into the calculator page, drops incomplete course
rows, runs the domain calculations and formats the results for display.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from cgpacalc.config.settings import settings
from cgpacalc.domain.errors import GradeError
from cgpacalc.domain.logic.gpa import aggregate
from cgpacalc.domain.logic.grading import MAX_MARKS, band_for, grade_for
from cgpacalc.domain.logic.standing import standing_tone, status_for
from cgpacalc.domain.models.entities import AggregateResult, Course, StandingLabel

logger = logging.getLogger(__name__)

CGPA_RANGE_MESSAGE = "Current CGPA must be between 0.0 and 4.0"
NEGATIVE_CREDITS_MESSAGE = "Completed credits cannot be negative"
NO_COURSES_MESSAGE = "Please add at least one course with valid information"

GRADE_COLORS = {
    "A+": "#16a34a",
    "A": "#16a34a",
    "B+": "#004ea2",
    "B": "#004ea2",
    "C+": "#64748b",
    "C": "#64748b",
    "D+": "#b45309",
    "D": "#b45309",
    "F": "#dc2626",
}
PENDING_COLOR = "#f59e0b"
ERROR_COLOR = "#ef4444"

RawValue = Optional[object]
CourseRow = Tuple[RawValue, RawValue, RawValue]


class CalculatorError(Exception):
    pass


class CoursePayload(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(min_length=1)
    credits: int = Field(gt=0)
    marks: float = Field(ge=0, le=100, allow_inf_nan=False)

    def to_course(self) -> Course:
        return Course(title=self.title, credits=self.credits, marks=self.marks)


class StudentPayload(BaseModel):
    current_cgpa: float = Field(default=0.0, ge=0, le=4, allow_inf_nan=False)
    completed_credits: int = Field(default=0, ge=0)


@dataclass(frozen=True)
class CalculationReport:
    courses: Tuple[Course, ...]
    result: AggregateResult
    standing: StandingLabel

    @property
    def semester_gpa_text(self) -> str:
        return format_gpa(self.result.semester_gpa)

    @property
    def cumulative_cgpa_text(self) -> str:
        return format_gpa(self.result.cumulative_cgpa)

    @property
    def standing_tone(self) -> str:
        return standing_tone(self.standing)


def format_gpa(value: float, places: Optional[int] = None) -> str:
    if places is None:
        places = settings.decimal_places
    return f"{value:.{places}f}"


def _blank(value: RawValue) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def collect_courses(rows: Iterable[CourseRow]) -> list[Course]:
    """Keep the rows that form a complete, valid course; drop the rest."""
    courses: list[Course] = []
    for index, (title, credits, marks) in enumerate(rows):
        if _blank(title) or _blank(credits) or _blank(marks):
            continue
        try:
            payload = CoursePayload(title=title, credits=credits, marks=marks)
        except ValidationError as exc:
            logger.debug("Dropping course row %d: %s", index, exc.errors()[0]["msg"])
            continue
        courses.append(payload.to_course())
    return courses


def _parse_marks(raw: RawValue) -> Optional[float]:
    if _blank(raw):
        return None
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return None
    return None if math.isnan(value) else value


def preview_grade(raw_marks: RawValue) -> str:
    marks = _parse_marks(raw_marks)
    if marks is None or marks < 0:
        return "-"
    if marks > MAX_MARKS:
        return "Max 100"
    return str(grade_for(marks))


def preview_color(raw_marks: RawValue) -> str:
    marks = _parse_marks(raw_marks)
    if marks is None or marks < 0:
        return PENDING_COLOR
    if marks > MAX_MARKS:
        return ERROR_COLOR
    return grade_color(grade_for(marks).letter)


def preview_range(raw_marks: RawValue) -> str:
    """Marks range of the previewed grade, e.g. "85-89", or "" with no grade."""
    marks = _parse_marks(raw_marks)
    if marks is None or not 0 <= marks <= MAX_MARKS:
        return ""
    band = band_for(grade_for(marks).letter)
    return f"{band.min_mark}-{band.max_mark}"


def grade_color(letter: str) -> str:
    return GRADE_COLORS.get(letter, PENDING_COLOR)


def _number_or_zero(raw: RawValue) -> float:
    """Read a student field the way the page does: unparseable input counts as 0."""
    if _blank(raw):
        return 0.0
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return 0.0
    return value if math.isfinite(value) else 0.0


def _student_payload(current_cgpa: RawValue, completed_credits: RawValue) -> StudentPayload:
    # Fractional credits are truncated toward zero, so "36.5" counts as 36.
    data = {
        "current_cgpa": _number_or_zero(current_cgpa),
        "completed_credits": int(_number_or_zero(completed_credits)),
    }
    try:
        return StudentPayload(**data)
    except ValidationError as exc:
        field = exc.errors()[0]["loc"][0]
        if field == "current_cgpa":
            raise CalculatorError(CGPA_RANGE_MESSAGE) from exc
        raise CalculatorError(NEGATIVE_CREDITS_MESSAGE) from exc


def calculate(
    current_cgpa: RawValue,
    completed_credits: RawValue,
    rows: Sequence[CourseRow],
) -> CalculationReport:
    """Run the semester and cumulative calculation for one form submission.

    Blank student fields count as 0. Raises CalculatorError with a message
    meant for the user when the input cannot produce a result.
    """
    student = _student_payload(current_cgpa, completed_credits)

    courses = collect_courses(rows)
    if not courses:
        raise CalculatorError(NO_COURSES_MESSAGE)

    try:
        result = aggregate(courses, student.current_cgpa, student.completed_credits)
    except GradeError as exc:
        raise CalculatorError(str(exc)) from exc

    standing = status_for(result.cumulative_cgpa)
    logger.info(
        "Calculated CGPA %s over %d credits (%s)",
        format_gpa(result.cumulative_cgpa),
        result.total_credits,
        standing,
    )
    return CalculationReport(courses=tuple(courses), result=result, standing=standing)
