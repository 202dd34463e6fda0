"""
Range classification for the ERG-SBC risk factors.

Each classifier maps a measurement onto the band label used as a key in
`ERG.tables`. Bands are half-open: a value equal to a cutpoint belongs to the
band starting at that cutpoint (age 34 -> "30-34", age 35 -> "35-39"). The
lowest band also absorbs anything below its cutpoint, so every classifier is
total over the numbers.
"""

import typing
from types import MappingProxyType

from .patient import Sex

# (lower bound, label) pairs, highest band first; None marks the catch-all band
Bands = typing.Sequence[typing.Tuple[typing.Optional[float], str]]

AGE_BANDS: Bands = (
    (75, "75+"),
    (70, "70-74"),
    (65, "65-69"),
    (60, "60-64"),
    (55, "55-59"),
    (50, "50-54"),
    (45, "45-49"),
    (40, "40-44"),
    (35, "35-39"),
    (None, "30-34"),
)

CHOLESTEROL_BANDS: Bands = (
    (280, ">=280"),
    (240, "240-279"),
    (200, "200-239"),
    (160, "160-199"),
    (None, "<160"),
)

MALE_HDL_BANDS: Bands = (
    (60, ">=60"),
    (50, "50-59"),
    (45, "45-49"),
    (35, "35-44"),
    (None, "<35"),
)

FEMALE_HDL_BANDS: Bands = (
    (60, ">=60"),
    (50, "50-59"),
    (40, "40-49"),
    (35, "35-44"),
    (None, "<35"),
)

MALE_SYSTOLIC_BANDS: Bands = (
    (160, ">=160"),
    (140, "140-159"),
    (130, "130-139"),
    (120, "120-129"),
    (None, "<120"),
)

FEMALE_SYSTOLIC_BANDS: Bands = (
    (160, ">=160"),
    (150, "150-159"),
    (140, "140-149"),
    (130, "130-139"),
    (120, "120-129"),
    (None, "<120"),
)

HDL_BANDS = MappingProxyType({
    Sex.MALE: MALE_HDL_BANDS,
    Sex.FEMALE: FEMALE_HDL_BANDS,
})

# Treatment changes the points, never the cutpoints
SYSTOLIC_BANDS = MappingProxyType({
    (Sex.MALE, False): MALE_SYSTOLIC_BANDS,
    (Sex.MALE, True): MALE_SYSTOLIC_BANDS,
    (Sex.FEMALE, False): FEMALE_SYSTOLIC_BANDS,
    (Sex.FEMALE, True): FEMALE_SYSTOLIC_BANDS,
})


def classify(value: float, bands: Bands) -> str:
    """
    Return the label of the first band whose lower bound is <= value.
    """
    for lower, label in bands:
        if lower is None or value >= lower:
            return label
    raise ValueError(f"Band table has no catch-all entry for {value!r}")


def classify_age(age: float) -> str:
    """Age band, "30-34" through "75+"."""
    return classify(age, AGE_BANDS)


def classify_cholesterol(cholesterol: float) -> str:
    """Total cholesterol band, "<160" through ">=280"."""
    return classify(cholesterol, CHOLESTEROL_BANDS)


def classify_hdl(hdl: float, sex: Sex) -> str:
    """HDL band; the middle cutpoint differs by sex."""
    return classify(hdl, HDL_BANDS[sex])


def classify_systolic(systolic: float, sex: Sex, treated: bool = False) -> str:
    """Systolic band for the sex; treatment only affects the points looked up later."""
    return classify(systolic, SYSTOLIC_BANDS[(sex, treated)])
