"""
Patient domain model.

Defines the Sex enumeration, the PatientInput dataclass consumed by the scoring
engine, and the ValidationError raised when input falls outside the ranges
covered by the ERG-SBC point tables.
"""

import typing
from dataclasses import dataclass
from enum import Enum

from stairval.notepad import create_notepad

# Accepted input ranges (inclusive on both ends)
AGE_RANGE = (30, 80)
CHOLESTEROL_RANGE = (100, 400)
HDL_RANGE = (20, 100)
SYSTOLIC_RANGE = (90, 200)

_RANGE_MESSAGES = {
    "age": "Age must be between {} and {} years",
    "cholesterol": "Total cholesterol must be between {} and {} mg/dL",
    "hdl": "HDL must be between {} and {} mg/dL",
    "systolic": "Systolic pressure must be between {} and {} mmHg",
}

SEX_REQUIRED = "Sex is required"
AGE_NOT_WHOLE = "Age must be a whole number of years"

FLAG_FIELDS = ("statin", "treated", "smoker", "diabetic")

_TRUE_LABELS = {"1", "true", "t", "yes", "y", "sim"}
_FALSE_LABELS = {"0", "false", "f", "no", "n", "nao", "não", ""}


class ValidationError(ValueError):
    """
    Raised when one or more patient fields are missing or out of range.

    Attributes:
        errors: One human-readable message per violated constraint.
    """

    def __init__(self, errors: typing.Sequence[str]):
        self.errors = tuple(errors)
        super().__init__("\n".join(self.errors))


class Sex(Enum):
    """
    Biological sex as used to select the ERG-SBC table set.
    """
    MALE = "M"
    FEMALE = "F"

    @classmethod
    def from_label(cls, label: str) -> "Sex":
        """
        Convert a form label ("M", "f", "male", "feminino", ...) into the enum.
        """
        key = label.strip().lower()
        mapping = {
            "m": cls.MALE,
            "male": cls.MALE,
            "masculino": cls.MALE,
            "f": cls.FEMALE,
            "female": cls.FEMALE,
            "feminino": cls.FEMALE,
        }
        try:
            return mapping[key]
        except KeyError:
            raise ValueError(f"Unknown sex label: {label!r}")


@dataclass(frozen=True)
class PatientInput:
    """
    Validated inputs for one cardiovascular risk assessment.

    Attributes:
        sex: Sex used to pick the per-sex tables.
        age: Age in whole years.
        cholesterol: Total cholesterol in mg/dL, as measured.
        hdl: HDL cholesterol in mg/dL.
        systolic: Systolic blood pressure in mmHg.
        statin: True if the patient takes a statin.
        treated: True if the patient is on antihypertensive treatment.
        smoker: True if the patient currently smokes.
        diabetic: True if the patient has diabetes.
    """

    sex: Sex
    age: int
    cholesterol: int
    hdl: int
    systolic: int
    statin: bool = False
    treated: bool = False
    smoker: bool = False
    diabetic: bool = False

    def __post_init__(self):
        errors = collect_violations(
            sex=self.sex,
            age=self.age,
            cholesterol=self.cholesterol,
            hdl=self.hdl,
            systolic=self.systolic,
            flags={name: getattr(self, name) for name in FLAG_FIELDS},
        )
        if errors:
            raise ValidationError(errors)

    @classmethod
    def from_mapping(cls, raw: typing.Mapping[str, typing.Any]) -> "PatientInput":
        """
        Build a PatientInput from loose form data.

        Numeric fields may be strings; flags accept booleans or yes/no style
        labels and default to False. Every problem is reported at once through
        a single ValidationError. Fractional numbers are truncated to whole
        values, the way the form read them.
        """
        notepad = create_notepad("patient")

        sex = None
        bad_sex_label = False
        raw_sex = raw.get("sex")
        if isinstance(raw_sex, Sex):
            sex = raw_sex
        elif raw_sex is not None and str(raw_sex).strip():
            try:
                sex = Sex.from_label(str(raw_sex))
            except ValueError as e:
                notepad.add_error(str(e))
                bad_sex_label = True

        numbers = {name: _to_int(raw.get(name)) for name in _RANGE_MESSAGES}
        for message in collect_violations(sex=sex, **numbers):
            # an unknown label was already reported above
            if bad_sex_label and message == SEX_REQUIRED:
                continue
            notepad.add_error(message)

        flags = {}
        for name in FLAG_FIELDS:
            try:
                flags[name] = _to_bool(raw.get(name))
            except ValueError as e:
                notepad.add_error(f"{name}: {e}")

        if notepad.has_errors():
            raise ValidationError([issue.message for issue in notepad.errors()])

        return cls(sex=sex, **numbers, **flags)


def collect_violations(
    sex: typing.Optional[Sex],
    age: typing.Optional[int],
    cholesterol: typing.Optional[int],
    hdl: typing.Optional[int],
    systolic: typing.Optional[int],
    flags: typing.Optional[typing.Mapping[str, typing.Any]] = None,
) -> list[str]:
    """
    Return one message per violated constraint, in field order. Flags, when
    given, must be real booleans.
    An empty list means the values are acceptable.
    """
    notepad = create_notepad("patient")

    if not isinstance(sex, Sex):
        notepad.add_error(SEX_REQUIRED)

    bounds = {
        "age": (age, AGE_RANGE),
        "cholesterol": (cholesterol, CHOLESTEROL_RANGE),
        "hdl": (hdl, HDL_RANGE),
        "systolic": (systolic, SYSTOLIC_RANGE),
    }
    for name, (value, (low, high)) in bounds.items():
        if not _is_number(value) or not low <= value <= high:
            notepad.add_error(_RANGE_MESSAGES[name].format(low, high))
        elif name == "age" and not isinstance(value, int):
            notepad.add_error(AGE_NOT_WHOLE)

    for name, value in (flags or {}).items():
        if not isinstance(value, bool):
            notepad.add_error(f"{name} must be True or False, got {value!r}")

    return [issue.message for issue in notepad.errors()]


def _is_number(value: typing.Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _to_int(value: typing.Any) -> typing.Optional[int]:
    """
    Parse a numeric form value. Returns None when missing or unparseable so the
    range check reports it.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        return int(float(str(value).strip()))
    except (ValueError, OverflowError):
        return None


def _to_bool(value: typing.Any) -> bool:
    """
    Boolean parsing for form flags:
    - True for: 1, '1', 'true', 'yes', 'y', 'sim' (case-insensitive)
    - False for: 0, '0', 'false', 'no', 'n', 'nao', '', None
    """
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    s = str(value).strip().lower()
    if s in _TRUE_LABELS:
        return True
    if s in _FALSE_LABELS:
        return False
    raise ValueError(f"cannot interpret {value!r} as yes/no")
