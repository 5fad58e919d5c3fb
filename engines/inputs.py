"""
Wellness ROI - Raw Inputs & Input Validator
The five organisational inputs, boundary parsing/clamping, and the
completeness check that gates the whole pipeline.
"""
import math
from dataclasses import dataclass, asdict, replace
from typing import Optional

INPUT_FIELDS = {
    'numEmployees': 'num_employees',
    'percentFemale': 'percent_female',
    'percentFemaleOver40': 'percent_female_over40',
    'avgSalary': 'avg_salary',
    'avgSickLeave': 'avg_sick_leave',
}
PERCENT_FIELDS = ('percent_female', 'percent_female_over40')

# Upper bounds that keep every derived product finite
MAX_VALUES = {
    'num_employees': 10_000_000,
    'avg_salary': 1e9,
    'avg_sick_leave': 366,
}


class InputError(ValueError):
    """A raw input value could not be accepted at the boundary."""


@dataclass(frozen=True)
class RawInputs:
    """Snapshot of the raw inputs. ``None`` means unset."""
    num_employees: Optional[int] = None
    percent_female: Optional[float] = None
    percent_female_over40: Optional[float] = None
    avg_salary: Optional[float] = None
    avg_sick_leave: Optional[float] = None

    def to_dict(self):
        values = asdict(self)
        return {key: values[attr] for key, attr in INPUT_FIELDS.items()}


def default_inputs():
    """Session-start defaults."""
    return RawInputs(num_employees=500, percent_female=50, percent_female_over40=40,
                     avg_salary=3750, avg_sick_leave=25)


def clamp(v, lo, hi):
    return max(lo, min(hi, v))


def is_complete(inputs):
    """True iff none of the five raw inputs is unset."""
    return all(getattr(inputs, attr) is not None for attr in INPUT_FIELDS.values())


def _coerce(key, attr, raw):
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return None
    if isinstance(raw, bool):
        raise InputError(f"{key}: expected a number, got {raw!r}")
    try:
        val = float(raw)
    except (TypeError, ValueError):
        raise InputError(f"{key}: expected a number, got {raw!r}") from None
    if not math.isfinite(val):
        raise InputError(f"{key}: expected a finite number, got {raw!r}")

    if attr in PERCENT_FIELDS:
        return clamp(val, 0, 100)
    if val < 0:
        raise InputError(f"{key}: must be non-negative, got {raw!r}")
    if val > MAX_VALUES[attr]:
        raise InputError(f"{key}: must be at most {MAX_VALUES[attr]:g}, got {raw!r}")
    if attr == 'num_employees':
        if not val.is_integer():
            raise InputError(f"{key}: must be a whole number, got {raw!r}")
        return int(val)
    return val


def apply_updates(inputs, updates):
    """Return a new snapshot with ``updates`` (camelCase keys) applied.

    All values are validated before anything is replaced, so a bad value
    leaves the caller's snapshot untouched.
    """
    unknown = sorted(set(updates) - set(INPUT_FIELDS))
    if unknown:
        raise InputError(f"Unknown input(s): {', '.join(unknown)}")
    changes = {INPUT_FIELDS[key]: _coerce(key, INPUT_FIELDS[key], raw)
               for key, raw in updates.items()}
    return replace(inputs, **changes)
