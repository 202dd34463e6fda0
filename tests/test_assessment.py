import dataclasses

import pytest

from ERG.assessment import Assessment, ComparisonLevel, RiskComparison, assess
from ERG.patient import PatientInput, Sex, ValidationError
from ERG.risk import HeartAgeStatus, RiskResult


def test_male_example_end_to_end(male_patient):
    result = assess(male_patient)

    assert isinstance(result, Assessment)
    assert result.patient is male_patient
    assert result.actual.total == 14
    assert result.ideal.total == 7
    assert result.points_difference == 7
    assert result.actual_risk == RiskResult(percent=18.4, heart_age=HeartAgeStatus.OVER_MAXIMUM)
    assert result.ideal_risk == RiskResult(percent=5.6, heart_age=55)
    assert len(result.recommendations) == 6


def test_female_example_end_to_end(female_patient):
    result = assess(female_patient)

    assert result.actual.total == 27
    assert result.ideal.total == 5
    assert result.actual_risk.percent == 30.0
    assert result.actual_risk.heart_age is HeartAgeStatus.OVER_MAXIMUM
    assert result.ideal_risk == RiskResult(percent=2.8, heart_age=60)
    assert result.comparison == RiskComparison(
        ratio=10.7, absolute_difference=27.2, relative_increase=971, level=ComparisonLevel.HIGHER,
    )


def test_ideal_patient_matches_ideal(ideal_male_patient):
    result = assess(ideal_male_patient)

    assert result.actual.total == result.ideal.total
    assert result.actual_risk == result.ideal_risk == RiskResult(percent=2.3, heart_age=40)
    assert result.comparison.level is ComparisonLevel.IDEAL
    assert result.comparison.ratio == 1.0
    assert result.comparison.relative_increase == 0


def test_comparison_of_male_example(male_patient):
    comparison = assess(male_patient).comparison
    assert comparison.ratio == 3.3
    assert comparison.absolute_difference == 12.8
    assert comparison.relative_increase == 229
    assert comparison.level is ComparisonLevel.HIGHER


@pytest.mark.parametrize("actual,ideal,level", [
    (1.6, 1.6, ComparisonLevel.IDEAL),
    (1.9, 1.6, ComparisonLevel.ELEVATED),
    (2.4, 1.6, ComparisonLevel.ELEVATED),
    (2.5, 1.6, ComparisonLevel.HIGHER),
])
def test_comparison_levels(actual, ideal, level):
    comparison = RiskComparison.between(RiskResult(actual, 50), RiskResult(ideal, 40))
    assert comparison.level is level


def test_assess_accepts_raw_form_data():
    result = assess({
        "sex": "M", "age": "55", "cholesterol": "220", "hdl": "45", "systolic": "145",
        "statin": "no", "treated": "no", "smoker": "no", "diabetic": "no",
    })
    assert result.actual.total == 14
    assert result.patient.sex is Sex.MALE


def test_assess_raw_data_reports_all_violations():
    with pytest.raises(ValidationError) as excinfo:
        assess({"sex": "F", "age": 90, "cholesterol": 50, "hdl": 45, "systolic": 250})
    assert len(excinfo.value.errors) == 3


def test_assessment_is_read_only(male_patient):
    result = assess(male_patient)
    with pytest.raises(dataclasses.FrozenInstanceError):
        result.recommendations = ()


def test_assess_is_deterministic():
    patient = PatientInput(sex=Sex.FEMALE, age=44, cholesterol=233, hdl=47, systolic=131, statin=True)
    assert assess(patient) == assess(patient)


def test_relative_increase_rounds_ties_up():
    """3.9% against 2.4% is a 62.5% increase, shown as 63."""
    patient = PatientInput(sex=Sex.FEMALE, age=57, cholesterol=180, hdl=60, systolic=125)
    result = assess(patient)

    assert result.actual_risk.percent == 3.9
    assert result.ideal_risk.percent == 2.4
    assert result.comparison.relative_increase == 63
    assert result.comparison.absolute_difference == 1.5


def test_ratio_rounds_ties_up():
    """4.5% against 2.0% is 2.25x, shown as 2.3x."""
    patient = PatientInput(sex=Sex.FEMALE, age=52, cholesterol=180, hdl=55, systolic=135)
    result = assess(patient)

    assert result.actual_risk.percent == 4.5
    assert result.ideal_risk.percent == 2.0
    assert result.comparison.ratio == 2.3
    assert result.comparison.relative_increase == 125


def test_assessment_is_hashable(male_patient):
    assert hash(assess(male_patient)) == hash(assess(male_patient))
    assert len({assess(male_patient), assess(male_patient)}) == 1
