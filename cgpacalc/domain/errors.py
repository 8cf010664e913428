from __future__ import annotations


class GradeError(ValueError):
    pass


class InvalidArgument(GradeError):
    pass


class OutOfRange(InvalidArgument):
    """Value outside the range the grading scale is defined for."""

    def __init__(self, name: str, value: float, low: float, high: float) -> None:
        super().__init__(f"{name} must be between {low} and {high}, got {value}")
        self.name = name
        self.value = value
        self.low = low
        self.high = high
