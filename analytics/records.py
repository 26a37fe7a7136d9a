"""
Immutable record snapshots handed to the aggregation functions.

Each record kind is a frozen dataclass tagged with its ``kind``. Optional
fields are explicit ``None`` so "not recorded" never gets confused with a
real zero. Rows are converted into records at the record store boundary;
nothing in ``analytics`` touches the ORM.
"""
from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Optional

CALORIE = 'calorie'
WEIGHT = 'weight'
WORKOUT = 'workout'

WORKOUT_TYPE_LABELS = {
    'upper': 'Upper Body',
    'lower': 'Lower Body',
    'full': 'Full Body',
    'cardio': 'Cardio',
    'hiit': 'HIIT',
    'other': 'Other',
}

INTENSITIES = ('low', 'medium', 'high')


def coerce_number(value, default=None) -> Optional[Decimal]:
    """
    Convert a loosely typed numeric value into a Decimal.

    Blank strings, None and values that fail to parse fall back to
    ``default``. Booleans are rejected rather than read as 0/1.
    """
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return default
    try:
        number = Decimal(str(value))
    except (InvalidOperation, ValueError):
        return default
    if not number.is_finite():
        return default
    return number


def as_calendar_date(value) -> date:
    """Truncate datetimes to their calendar date and parse ISO strings."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    if 'T' in text or ' ' in text:
        return datetime.fromisoformat(text.replace('Z', '+00:00')).date()
    return date.fromisoformat(text)


def workout_type_label(workout_type: str) -> str:
    return WORKOUT_TYPE_LABELS.get(workout_type, workout_type)


@dataclass(frozen=True)
class CalorieRecord:
    id: int
    user_id: int
    date: date
    total_calories: int
    created_at: datetime
    protein: Optional[Decimal] = None
    carbs: Optional[Decimal] = None
    fat: Optional[Decimal] = None
    notes: Optional[str] = None
    kind: str = field(default=CALORIE, init=False)


@dataclass(frozen=True)
class WeightRecord:
    id: int
    user_id: int
    date: date
    weight: Decimal
    created_at: datetime
    notes: Optional[str] = None
    kind: str = field(default=WEIGHT, init=False)


@dataclass(frozen=True)
class WorkoutRecord:
    id: int
    user_id: int
    date: date
    type: str
    duration: int
    intensity: str
    created_at: datetime
    notes: Optional[str] = None
    kind: str = field(default=WORKOUT, init=False)

    @property
    def type_label(self):
        return workout_type_label(self.type)

