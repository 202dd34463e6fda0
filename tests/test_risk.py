import logging

import pytest

from ERG import risk
from ERG.patient import Sex
from ERG.risk import HeartAgeStatus, RiskResult, evaluate, heart_age, risk_percent


@pytest.mark.parametrize("total,expected", [
    (-10, 1.0),
    (-5, 1.0),
    (-3, 1.0),
    (-2, 1.1),
    (0, 1.6),
    (7, 5.6),
    (14, 18.4),
    (17, 29.4),
    (18, 30.0),
    (25, 30.0),
    (100, 30.0),
])
def test_male_risk_percent(total, expected):
    assert risk_percent(total, Sex.MALE) == expected


@pytest.mark.parametrize("total,expected", [
    (-9, 1.0),
    (-4, 1.0),
    (0, 1.2),
    (5, 2.8),
    (13, 10.0),
    (20, 28.5),
    (21, 30.0),
    (22, 30.0),
    (40, 30.0),
])
def test_female_risk_percent(total, expected):
    assert risk_percent(total, Sex.FEMALE) == expected


def test_risk_gap_falls_back_to_ceiling(monkeypatch, caplog):
    """A total missing from the table inside its range returns 30% and warns."""
    monkeypatch.setattr(risk, "RISK_TABLES", {Sex.MALE: {-3: 1.0, 0: 1.6, 5: 3.9}})

    with caplog.at_level(logging.WARNING, logger="ERG.risk"):
        assert risk_percent(2, Sex.MALE) == 30.0
    assert "No male risk entry for total 2" in caplog.text


@pytest.mark.parametrize("sex,total,expected", [
    (Sex.MALE, -3, 30),
    (Sex.MALE, 0, 37),
    (Sex.MALE, 7, 55),
    (Sex.MALE, 12, 75),
    (Sex.MALE, 13, HeartAgeStatus.OVER_MAXIMUM),
    (Sex.MALE, 14, HeartAgeStatus.OVER_MAXIMUM),
    (Sex.MALE, -4, 30),
    (Sex.MALE, -20, 30),
    (Sex.FEMALE, -4, 30),
    (Sex.FEMALE, 2, 48),
    (Sex.FEMALE, 8, 75),
    (Sex.FEMALE, 9, HeartAgeStatus.OVER_MAXIMUM),
    (Sex.FEMALE, -5, 30),
])
def test_heart_age(sex, total, expected):
    assert heart_age(total, sex) == expected


def test_heart_age_gap_is_not_applicable(monkeypatch, caplog):
    monkeypatch.setattr(risk, "HEART_AGE_TABLES", {Sex.FEMALE: {-4: 30, 0: 40, 8: 75}})

    with caplog.at_level(logging.WARNING, logger="ERG.risk"):
        assert heart_age(3, Sex.FEMALE) is HeartAgeStatus.NOT_APPLICABLE
    assert "No female heart age entry for total 3" in caplog.text


def test_evaluate_combines_lookups():
    result = evaluate(14, Sex.MALE)
    assert result == RiskResult(percent=18.4, heart_age=HeartAgeStatus.OVER_MAXIMUM)
    assert not result.heart_age_known

    assert evaluate(7, Sex.MALE).heart_age_known


def test_sentinel_values():
    assert HeartAgeStatus.OVER_MAXIMUM == ">75"
    assert HeartAgeStatus.NOT_APPLICABLE == "N/A"
