from __future__ import annotations

from cgpacalc.domain.models.entities import MAX_CGPA, MIN_CGPA, StandingLabel

STANDING_BANDS: tuple[tuple[float, StandingLabel], ...] = (
    (3.75, StandingLabel.DEANS_LIST),
    (3.50, StandingLabel.EXCELLENT),
    (3.00, StandingLabel.GOOD),
    (2.50, StandingLabel.SATISFACTORY),
    (2.00, StandingLabel.WARNING),
)

_TONES = {
    StandingLabel.DEANS_LIST: "excellent",
    StandingLabel.EXCELLENT: "excellent",
    StandingLabel.GOOD: "good",
    StandingLabel.SATISFACTORY: "good",
    StandingLabel.WARNING: "warning",
    StandingLabel.PROBATION: "probation",
    StandingLabel.INVALID: "invalid",
}


def status_for(cgpa: float) -> StandingLabel:
    if not MIN_CGPA <= cgpa <= MAX_CGPA:
        return StandingLabel.INVALID
    for threshold, label in STANDING_BANDS:
        if cgpa >= threshold:
            return label
    return StandingLabel.PROBATION


def standing_tone(label: StandingLabel) -> str:
    return _TONES[label]
