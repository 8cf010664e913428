from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

MIN_CGPA = 0.0
MAX_CGPA = 4.0


@dataclass(frozen=True)
class GradeBand:
    min_mark: int
    max_mark: int
    letter: str
    point: float


@dataclass(frozen=True)
class GradeResult:
    letter: str
    point: float

    def __str__(self) -> str:
        return f"{self.letter} ({self.point:.2f})"


@dataclass(frozen=True)
class Course:
    title: str
    credits: int
    marks: float


@dataclass(frozen=True)
class AggregateResult:
    semester_gpa: float
    cumulative_cgpa: float
    total_credits: int


class StandingLabel(str, Enum):
    DEANS_LIST = "Dean's List"
    EXCELLENT = "Excellent Standing"
    GOOD = "Good Standing"
    SATISFACTORY = "Satisfactory"
    WARNING = "Warning"
    PROBATION = "Academic Probation"
    INVALID = "Invalid CGPA"

    def __str__(self) -> str:
        return self.value
