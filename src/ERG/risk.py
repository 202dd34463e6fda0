"""
Point total -> 10-year risk and heart age.

Both lookups are total over the integers:
- risk below the table clamps to the lowest entry; at or above the per-sex
  threshold it is the 30% ceiling; an unmapped total in between also falls
  back to the ceiling.
- heart age beyond the table is ">75" (above) or the table's youngest age
  (below); a gap inside the table is "N/A".
The in-range fallbacks cannot trigger with the shipped tables; if they ever do
a warning is logged, since it means a table is missing an entry.
"""

import logging
import typing
from dataclasses import dataclass
from enum import Enum

from .patient import Sex
from .tables import HEART_AGE_TABLES, RISK_CEILING, RISK_CEILING_THRESHOLDS, RISK_TABLES

LOGGER = logging.getLogger(__name__)


class HeartAgeStatus(str, Enum):
    """
    Heart age outcomes that are not a number of years.
    """
    NOT_APPLICABLE = "N/A"
    OVER_MAXIMUM = ">75"


HeartAge = typing.Union[int, HeartAgeStatus]


@dataclass(frozen=True)
class RiskResult:
    """
    Attributes:
        percent: 10-year cardiovascular risk in %, rounded to one decimal.
        heart_age: Equivalent heart age in years, or a HeartAgeStatus sentinel.
    """

    percent: float
    heart_age: HeartAge

    @property
    def heart_age_known(self) -> bool:
        return not isinstance(self.heart_age, HeartAgeStatus)


def risk_percent(total: int, sex: Sex) -> float:
    table = RISK_TABLES[sex]
    lowest = min(table)

    if total <= lowest:
        return table[lowest]
    if total >= RISK_CEILING_THRESHOLDS[sex]:
        return RISK_CEILING

    try:
        return table[total]
    except KeyError:
        LOGGER.warning(
            "No %s risk entry for total %r; falling back to %.1f%%",
            sex.name.lower(), total, RISK_CEILING,
        )
        return RISK_CEILING


def heart_age(total: int, sex: Sex) -> HeartAge:
    table = HEART_AGE_TABLES[sex]
    if total in table:
        return table[total]

    if total > max(table):
        return HeartAgeStatus.OVER_MAXIMUM
    if total < min(table):
        return table[min(table)]

    LOGGER.warning("No %s heart age entry for total %r", sex.name.lower(), total)
    return HeartAgeStatus.NOT_APPLICABLE


def evaluate(total: int, sex: Sex) -> RiskResult:
    """
    Look up risk and heart age for a point total.
    """
    result = RiskResult(
        percent=round(risk_percent(total, sex), 1),
        heart_age=heart_age(total, sex),
    )
    LOGGER.debug("Total %d (%s) -> %.1f%%, heart age %s", total, sex.name.lower(), result.percent, result.heart_age)
    return result
