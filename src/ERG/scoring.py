"""
ERG-SBC scoring engine.

Turns a PatientInput into a per-factor point breakdown using the band
classifiers in `ERG.ranges` and the per-sex tables in `ERG.tables`.

Two breakdowns are produced per assessment:
- `score(patient)`: the patient's actual profile.
- `score_ideal(age, sex)`: the same age and sex with every modifiable factor at
  its reference value (cholesterol 180 mg/dL, HDL 60 mg/dL, systolic 110 mmHg
  untreated, non-smoker, non-diabetic). Age is never substituted.
"""

import logging
import math
import typing
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from .patient import PatientInput, Sex
from .ranges import classify_age, classify_cholesterol, classify_hdl, classify_systolic
from .tables import FACTOR_TABLES

LOGGER = logging.getLogger(__name__)

# Multiplier estimating pre-treatment total cholesterol for statin users
STATIN_ADJUSTMENT = 1.43

IDEAL_CHOLESTEROL = 180
IDEAL_HDL = 60
IDEAL_SYSTOLIC = 110


class Factor(Enum):
    """
    The six ERG-SBC risk factors, in breakdown order.
    """
    AGE = "Age"
    CHOLESTEROL = "Total cholesterol"
    HDL = "HDL cholesterol"
    SYSTOLIC = "Systolic pressure"
    SMOKING = "Smoking"
    DIABETES = "Diabetes"

    @property
    def label(self) -> str:
        return self.value


@dataclass(frozen=True)
class FactorScore:
    """
    One factor's contribution to the total.

    Attributes:
        value: The number (or flag) that was classified, after any statin adjustment.
        display: Human-readable value, e.g. "200 mg/dL (adjusted: 286)".
        band: The matched band label, or "yes"/"no" for boolean factors.
        points: Signed points for that band.
    """

    value: typing.Union[int, bool]
    display: str
    band: str
    points: int


@dataclass(frozen=True)
class ScoreBreakdown:
    """
    Ordered per-factor scores plus their sum. The total may be negative.
    """

    factors: typing.Mapping[Factor, FactorScore]

    def __hash__(self) -> int:
        return hash(tuple(self.factors.items()))

    @property
    def total(self) -> int:
        return sum(item.points for item in self.factors.values())

    def __getitem__(self, factor: Factor) -> FactorScore:
        return self.factors[factor]

    def difference(self, other: "ScoreBreakdown") -> dict[Factor, int]:
        """Per-factor points of this breakdown minus `other`."""
        return {
            factor: self.factors[factor].points - other.factors[factor].points
            for factor in Factor
        }


def adjust_for_statin(cholesterol: int) -> int:
    """
    Scale a statin-lowered cholesterol reading back up, rounding half up.
    """
    return int(math.floor(cholesterol * STATIN_ADJUSTMENT + 0.5))


def score(patient: PatientInput) -> ScoreBreakdown:
    """
    Compute the detailed point breakdown for a patient's actual profile.
    """
    tables = FACTOR_TABLES[patient.sex]
    factors: dict[Factor, FactorScore] = {}

    # Age
    age_band = classify_age(patient.age)
    factors[Factor.AGE] = FactorScore(
        value=patient.age,
        display=f"{patient.age} years",
        band=age_band,
        points=tables.age[age_band],
    )

    # Cholesterol, classified on the statin-adjusted value
    cholesterol = patient.cholesterol
    display = f"{patient.cholesterol} mg/dL"
    if patient.statin:
        cholesterol = adjust_for_statin(patient.cholesterol)
        display += f" (adjusted: {cholesterol})"
    cholesterol_band = classify_cholesterol(cholesterol)
    factors[Factor.CHOLESTEROL] = FactorScore(
        value=cholesterol,
        display=display,
        band=cholesterol_band,
        points=tables.cholesterol[cholesterol_band],
    )

    # HDL
    hdl_band = classify_hdl(patient.hdl, patient.sex)
    factors[Factor.HDL] = FactorScore(
        value=patient.hdl,
        display=f"{patient.hdl} mg/dL",
        band=hdl_band,
        points=tables.hdl[hdl_band],
    )

    # Systolic pressure: bands by sex, points by sex and treatment
    systolic_band = classify_systolic(patient.systolic, patient.sex, patient.treated)
    factors[Factor.SYSTOLIC] = FactorScore(
        value=patient.systolic,
        display=f"{patient.systolic} mmHg" + (" (treated)" if patient.treated else ""),
        band=systolic_band,
        points=tables.systolic(patient.treated)[systolic_band],
    )

    factors[Factor.SMOKING] = _flag_score(patient.smoker, tables.smoking)
    factors[Factor.DIABETES] = _flag_score(patient.diabetic, tables.diabetes)

    breakdown = ScoreBreakdown(factors=MappingProxyType(factors))
    LOGGER.debug(
        "Scored %s patient aged %d: %s -> total %d",
        patient.sex.name.lower(),
        patient.age,
        ", ".join(f"{f.name}={s.band}:{s.points:+d}" for f, s in factors.items()),
        breakdown.total,
    )
    return breakdown


def score_ideal(age: int, sex: Sex) -> ScoreBreakdown:
    """
    Score the best modifiable profile at the patient's real age.

    Reference values are run through the same classifiers as a real patient,
    so the ideal bands always agree with the tables.
    """
    tables = FACTOR_TABLES[sex]

    age_band = classify_age(age)
    cholesterol_band = classify_cholesterol(IDEAL_CHOLESTEROL)
    hdl_band = classify_hdl(IDEAL_HDL, sex)
    systolic_band = classify_systolic(IDEAL_SYSTOLIC, sex, treated=False)

    factors = {
        Factor.AGE: FactorScore(age, f"{age} years", age_band, tables.age[age_band]),
        Factor.CHOLESTEROL: FactorScore(
            IDEAL_CHOLESTEROL,
            f"{IDEAL_CHOLESTEROL} mg/dL",
            cholesterol_band,
            tables.cholesterol[cholesterol_band],
        ),
        Factor.HDL: FactorScore(
            IDEAL_HDL, f"{IDEAL_HDL} mg/dL", hdl_band, tables.hdl[hdl_band]
        ),
        Factor.SYSTOLIC: FactorScore(
            IDEAL_SYSTOLIC,
            f"{IDEAL_SYSTOLIC} mmHg",
            systolic_band,
            tables.systolic_untreated[systolic_band],
        ),
        Factor.SMOKING: _flag_score(False, tables.smoking),
        Factor.DIABETES: _flag_score(False, tables.diabetes),
    }

    breakdown = ScoreBreakdown(factors=MappingProxyType(factors))
    LOGGER.debug("Ideal %s profile at age %d -> total %d", sex.name.lower(), age, breakdown.total)
    return breakdown


def _flag_score(flag: bool, table: typing.Mapping[str, int]) -> FactorScore:
    key = "yes" if flag else "no"
    return FactorScore(
        value=flag,
        display="Yes" if flag else "No",
        band=key,
        points=table[key],
    )
