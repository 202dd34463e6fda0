"""
ERG-SBC point tables.

Static data only: per-sex factor tables (band -> points), point-total -> 10-year
risk tables and point-total -> heart age tables. Everything is wrapped in
read-only mappings at import time; nothing here changes at runtime.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from .patient import Sex


@dataclass(frozen=True)
class FactorTables:
    """
    Points for each risk factor band, for one sex.

    Attributes:
        age: Age band -> points.
        cholesterol: Total cholesterol band -> points.
        hdl: HDL band -> points.
        systolic_untreated: Systolic band -> points without antihypertensive treatment.
        systolic_treated: Systolic band -> points under antihypertensive treatment.
        smoking: "yes"/"no" -> points.
        diabetes: "yes"/"no" -> points.
    """

    age: Mapping[str, int]
    cholesterol: Mapping[str, int]
    hdl: Mapping[str, int]
    systolic_untreated: Mapping[str, int]
    systolic_treated: Mapping[str, int]
    smoking: Mapping[str, int]
    diabetes: Mapping[str, int]

    def systolic(self, treated: bool) -> Mapping[str, int]:
        return self.systolic_treated if treated else self.systolic_untreated


def _frozen(table: dict) -> Mapping:
    return MappingProxyType(dict(table))


MALE_TABLES = FactorTables(
    age=_frozen({
        "30-34": 0, "35-39": 2, "40-44": 5, "45-49": 6,
        "50-54": 8, "55-59": 10, "60-64": 11, "65-69": 12,
        "70-74": 14, "75+": 15,
    }),
    cholesterol=_frozen({
        "<160": 0, "160-199": 1, "200-239": 2, "240-279": 3, ">=280": 4,
    }),
    hdl=_frozen({
        ">=60": -2, "50-59": -1, "45-49": 0, "35-44": 1, "<35": 2,
    }),
    systolic_untreated=_frozen({
        "<120": -2, "120-129": 0, "130-139": 1, "140-159": 2, ">=160": 3,
    }),
    systolic_treated=_frozen({
        "<120": 0, "120-129": 2, "130-139": 3, "140-159": 4, ">=160": 5,
    }),
    smoking=_frozen({"yes": 4, "no": 0}),
    diabetes=_frozen({"yes": 3, "no": 0}),
)

FEMALE_TABLES = FactorTables(
    age=_frozen({
        "30-34": 0, "35-39": 2, "40-44": 4, "45-49": 5,
        "50-54": 7, "55-59": 8, "60-64": 9, "65-69": 10,
        "70-74": 11, "75+": 12,
    }),
    cholesterol=_frozen({
        "<160": 0, "160-199": 1, "200-239": 3, "240-279": 4, ">=280": 5,
    }),
    hdl=_frozen({
        ">=60": -2, "50-59": -1, "40-49": 0, "35-44": 1, "<35": 2,
    }),
    systolic_untreated=_frozen({
        "<120": -3, "120-129": 0, "130-139": 1, "140-149": 2, "150-159": 4, ">=160": 5,
    }),
    systolic_treated=_frozen({
        "<120": -1, "120-129": 2, "130-139": 3, "140-149": 5, "150-159": 6, ">=160": 7,
    }),
    smoking=_frozen({"yes": 3, "no": 0}),
    diabetes=_frozen({"yes": 4, "no": 0}),
)

FACTOR_TABLES: Mapping[Sex, FactorTables] = MappingProxyType({
    Sex.MALE: MALE_TABLES,
    Sex.FEMALE: FEMALE_TABLES,
})

# 10-year cardiovascular risk (%) by point total
MALE_RISK = _frozen({
    -3: 1.0, -2: 1.1, -1: 1.4, 0: 1.6, 1: 1.9, 2: 2.3, 3: 2.8,
    4: 3.3, 5: 3.9, 6: 4.7, 7: 5.6, 8: 6.7, 9: 7.9, 10: 9.4,
    11: 11.2, 12: 13.2, 13: 15.6, 14: 18.4, 15: 21.6, 16: 25.3,
    17: 29.4, 18: 30.0, 19: 30.0, 20: 30.0, 21: 30.0,
})

FEMALE_RISK = _frozen({
    -4: 1.0, -3: 1.0, -2: 1.0, -1: 1.0, 0: 1.2, 1: 1.5, 2: 1.7, 3: 2.0,
    4: 2.4, 5: 2.8, 6: 3.3, 7: 3.9, 8: 4.5, 9: 5.3, 10: 6.3,
    11: 7.3, 12: 8.6, 13: 10.0, 14: 11.7, 15: 13.7, 16: 15.9,
    17: 18.5, 18: 21.6, 19: 24.8, 20: 28.5, 21: 30.0, 22: 30.0,
})

RISK_TABLES: Mapping[Sex, Mapping[int, float]] = MappingProxyType({
    Sex.MALE: MALE_RISK,
    Sex.FEMALE: FEMALE_RISK,
})

# Equivalent heart age (years) by point total
MALE_HEART_AGE = _frozen({
    -3: 30, -2: 32, -1: 35, 0: 37, 1: 38, 2: 40, 3: 45, 4: 47,
    5: 50, 6: 52, 7: 55, 8: 60, 9: 65, 10: 67, 11: 70, 12: 75,
})

FEMALE_HEART_AGE = _frozen({
    -4: 30, -3: 32, -2: 35, -1: 38, 0: 40, 1: 45, 2: 48, 3: 50,
    4: 55, 5: 60, 6: 65, 7: 70, 8: 75,
})

HEART_AGE_TABLES: Mapping[Sex, Mapping[int, int]] = MappingProxyType({
    Sex.MALE: MALE_HEART_AGE,
    Sex.FEMALE: FEMALE_HEART_AGE,
})

RISK_CEILING = 30.0

# Totals at or above these always map to RISK_CEILING
RISK_CEILING_THRESHOLDS: Mapping[Sex, int] = MappingProxyType({
    Sex.MALE: 18,
    Sex.FEMALE: 21,
})
