"""
Assessment orchestration.

`assess` is the single entry point for callers: it scores the patient and the
ideal profile, evaluates both totals, compares the two risks, and selects the
recommendations. The returned Assessment is fully populated and read-only.
"""

import logging
import math
import typing
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum

from .patient import PatientInput
from .recommendations import recommend
from .risk import RiskResult, evaluate
from .scoring import ScoreBreakdown, score, score_ideal

LOGGER = logging.getLogger(__name__)

# Risk ratio above which the actual risk is reported as clearly higher than ideal
HIGHER_RATIO = 1.5


class ComparisonLevel(Enum):
    """How far the actual risk sits above the ideal-profile risk."""
    IDEAL = "ideal"
    ELEVATED = "elevated"
    HIGHER = "higher"


@dataclass(frozen=True)
class RiskComparison:
    """
    Actual risk measured against the ideal-profile risk.

    Attributes:
        ratio: actual / ideal, one decimal.
        absolute_difference: actual - ideal in percentage points, one decimal.
        relative_increase: (actual - ideal) / ideal as a whole percentage.
        level: IDEAL, ELEVATED (ratio > 1.0) or HIGHER (ratio > 1.5).
    """

    ratio: float
    absolute_difference: float
    relative_increase: int
    level: ComparisonLevel

    @classmethod
    def between(cls, actual: RiskResult, ideal: RiskResult) -> "RiskComparison":
        # ideal risk is never below the table minimum (1.0%), so never zero
        ratio = actual.percent / ideal.percent
        if ratio > HIGHER_RATIO:
            level = ComparisonLevel.HIGHER
        elif ratio > 1.0:
            level = ComparisonLevel.ELEVATED
        else:
            level = ComparisonLevel.IDEAL
        return cls(
            ratio=_round_half_up(ratio),
            absolute_difference=_round_half_up(actual.percent - ideal.percent),
            relative_increase=int(math.floor((actual.percent - ideal.percent) / ideal.percent * 100 + 0.5)),
            level=level,
        )


def _round_half_up(value: float) -> float:
    """Round to one decimal with ties going up, as displayed percentages are."""
    return float(Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


@dataclass(frozen=True)
class Assessment:
    """
    Result of one risk assessment.

    Attributes:
        patient: The validated input.
        actual: Point breakdown of the patient's profile.
        ideal: Point breakdown of the ideal profile at the same age.
        actual_risk: Risk and heart age for `actual.total`.
        ideal_risk: Risk and heart age for `ideal.total`.
        comparison: How actual risk compares with ideal risk.
        recommendations: Ordered advice strings.
    """

    patient: PatientInput
    actual: ScoreBreakdown
    ideal: ScoreBreakdown
    actual_risk: RiskResult
    ideal_risk: RiskResult
    comparison: RiskComparison
    recommendations: tuple[str, ...]

    @property
    def points_difference(self) -> int:
        return self.actual.total - self.ideal.total


def assess(patient: typing.Union[PatientInput, typing.Mapping[str, typing.Any]]) -> Assessment:
    """
    Run the full ERG-SBC assessment.

    `patient` may be a PatientInput or raw form data; raw data is validated
    first and a ValidationError listing every violated field propagates.
    """
    if not isinstance(patient, PatientInput):
        patient = PatientInput.from_mapping(patient)

    actual = score(patient)
    ideal = score_ideal(patient.age, patient.sex)
    actual_risk = evaluate(actual.total, patient.sex)
    ideal_risk = evaluate(ideal.total, patient.sex)

    assessment = Assessment(
        patient=patient,
        actual=actual,
        ideal=ideal,
        actual_risk=actual_risk,
        ideal_risk=ideal_risk,
        comparison=RiskComparison.between(actual_risk, ideal_risk),
        recommendations=recommend(patient, actual, ideal),
    )
    LOGGER.info(
        "Assessment complete: total %d (ideal %d), risk %.1f%% (ideal %.1f%%)",
        actual.total, ideal.total, actual_risk.percent, ideal_risk.percent,
    )
    return assessment
