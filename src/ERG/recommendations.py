"""
Advice selection for an assessment.

The list is always built in the same order:
1) exactly one tier message chosen by how far the actual total sits above the
   ideal total,
2) factor warnings for cholesterol, HDL, pressure, smoking and diabetes,
   judged on the patient's raw readings,
3) the three general lifestyle messages.
"""

from .patient import PatientInput
from .scoring import ScoreBreakdown

TIER_MESSAGES = (
    # (largest points difference covered, message)
    (0, "Congratulations! Your cardiovascular profile is excellent. Keep up your healthy habits."),
    (3, "Your risk is slightly increased. Small changes can make a big difference."),
    (6, "Your risk is moderately increased. It is important to make lifestyle changes."),
)
SIGNIFICANT_TIER = "Your risk is significantly increased. Seek regular medical follow-up."

CHOLESTEROL_VERY_HIGH = "Very high cholesterol: consider dietary changes and an evaluation for medication"
CHOLESTEROL_HIGH = "High cholesterol: reduce saturated fats and increase fiber in your diet"
LOW_HDL = "Low HDL: do regular aerobic exercise (150 min/week)"
HIGH_PRESSURE = "High blood pressure: reduce salt, control your weight and stay physically active"
BORDERLINE_PRESSURE = "Borderline blood pressure: monitor it regularly and keep healthy habits"
QUIT_SMOKING = "QUITTING SMOKING is the single most important step to reduce your risk"
DIABETES_CONTROL = "Diabetes: keep tight glycemic control (HbA1c < 7%)"

LIFESTYLE_MESSAGES = (
    "Follow a Mediterranean diet: fruits, vegetables, whole grains, olive oil",
    "Manage stress with meditation, yoga or relaxation techniques",
    "Sleep 7-8 hours of good quality every night",
)


def tier_message(points_difference: int) -> str:
    for upper, message in TIER_MESSAGES:
        if points_difference <= upper:
            return message
    return SIGNIFICANT_TIER


def recommend(patient: PatientInput, actual: ScoreBreakdown, ideal: ScoreBreakdown) -> tuple[str, ...]:
    advice = [tier_message(actual.total - ideal.total)]

    # Raw readings, not the statin-adjusted value
    if patient.cholesterol >= 240:
        advice.append(CHOLESTEROL_VERY_HIGH)
    elif patient.cholesterol >= 200:
        advice.append(CHOLESTEROL_HIGH)

    if patient.hdl < 40:
        advice.append(LOW_HDL)

    if patient.systolic >= 140:
        advice.append(HIGH_PRESSURE)
    elif patient.systolic >= 130:
        advice.append(BORDERLINE_PRESSURE)

    if patient.smoker:
        advice.append(QUIT_SMOKING)
    if patient.diabetic:
        advice.append(DIABETES_CONTROL)

    advice.extend(LIFESTYLE_MESSAGES)
    return tuple(advice)
