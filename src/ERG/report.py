"""
Rendering helpers for assessments: value formatting and the per-factor
analysis table comparing the actual profile with the ideal one.
"""

import pandas as pd

from .assessment import Assessment
from .risk import HeartAge, HeartAgeStatus
from .scoring import Factor

ANALYSIS_COLUMNS = [
    "actual_value",
    "ideal_value",
    "actual_points",
    "ideal_points",
    "difference",
]


def format_percent(value: float) -> str:
    return f"{value:.1f}%"


def format_points(points: int) -> str:
    return f"+{points}" if points > 0 else str(points)


def format_heart_age(heart_age: HeartAge) -> str:
    if heart_age is HeartAgeStatus.OVER_MAXIMUM:
        return "> 75 years"
    if heart_age is HeartAgeStatus.NOT_APPLICABLE:
        return "N/A"
    return f"{heart_age} years"


def analysis_table(assessment: Assessment) -> pd.DataFrame:
    """
    One row per factor plus a "Total" row:
      - actual/ideal display values
      - actual/ideal points and their difference
    Indexed by factor label.
    """
    actual, ideal = assessment.actual, assessment.ideal
    differences = actual.difference(ideal)

    rows = [
        {
            "factor": factor.label,
            "actual_value": actual[factor].display,
            "ideal_value": ideal[factor].display,
            "actual_points": actual[factor].points,
            "ideal_points": ideal[factor].points,
            "difference": differences[factor],
        }
        for factor in Factor
    ]
    rows.append({
        "factor": "Total",
        "actual_value": "",
        "ideal_value": "",
        "actual_points": actual.total,
        "ideal_points": ideal.total,
        "difference": assessment.points_difference,
    })

    return pd.DataFrame(rows).set_index("factor")[ANALYSIS_COLUMNS]


def render_analysis_table(table: pd.DataFrame) -> str:
    """Format the analysis table for terminal output with signed point columns."""
    shown = table.copy()
    for column in ("actual_points", "ideal_points", "difference"):
        shown[column] = shown[column].map(format_points)
    shown.columns = [column.replace("_", " ").capitalize() for column in shown.columns]
    shown.index.name = None
    return shown.to_string()
