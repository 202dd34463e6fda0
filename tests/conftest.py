import pytest

from ERG.patient import PatientInput, Sex


@pytest.fixture
def male_patient() -> PatientInput:
    """
    55-year-old man, untreated stage 1 pressure, borderline cholesterol.
    Scores 14 points.
    """
    return PatientInput(
        sex=Sex.MALE,
        age=55,
        cholesterol=220,
        hdl=45,
        systolic=145,
    )


@pytest.fixture
def female_patient() -> PatientInput:
    """
    60-year-old woman with every risk factor present. Scores 27 points.
    """
    return PatientInput(
        sex=Sex.FEMALE,
        age=60,
        cholesterol=250,
        hdl=38,
        systolic=152,
        treated=True,
        smoker=True,
        diabetic=True,
    )


@pytest.fixture
def ideal_male_patient() -> PatientInput:
    """
    40-year-old man already sitting on the ideal reference values.
    """
    return PatientInput(
        sex=Sex.MALE,
        age=40,
        cholesterol=180,
        hdl=60,
        systolic=110,
    )
