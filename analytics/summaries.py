"""
Scalar rollups for the statistics page and dashboard.

Each summarize_* function takes the full list it is given (callers decide
whether to pre-filter with ``analytics.windows``) and never raises on empty
input: no entries means ``NO_DATA``, which renders as a placeholder rather
than as zero.
"""
from dataclasses import asdict, dataclass
from decimal import Decimal
from typing import Optional

from .formatting import PLACEHOLDER, round_half_up, to_json_number
from .records import workout_type_label


class NoData:
    """Sentinel for "nothing to summarize". Falsy, and a singleton."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self):
        return False

    def __repr__(self):
        return 'NO_DATA'


NO_DATA = NoData()


@dataclass(frozen=True)
class CalorieSummary:
    average: int
    highest: int
    lowest: int


@dataclass(frozen=True)
class WeightSummary:
    start: Decimal
    current: Decimal
    change: Decimal


@dataclass(frozen=True)
class WorkoutSummary:
    total: int
    most_common_type: str
    avg_duration: int

    @property
    def most_common_label(self):
        return workout_type_label(self.most_common_type)


def summarize_calories(entries):
    """Average (rounded), highest and lowest daily totals."""
    values = [entry.total_calories for entry in entries]
    if not values:
        return NO_DATA
    return CalorieSummary(
        average=round_half_up(sum(values) / len(values)),
        highest=max(values),
        lowest=min(values),
    )


def summarize_weights(entries):
    """Earliest weight, latest weight and the signed change between them."""
    ordered = sorted(entries, key=lambda entry: entry.date)
    if not ordered:
        return NO_DATA
    start = Decimal(ordered[0].weight)
    current = Decimal(ordered[-1].weight)
    return WeightSummary(start=start, current=current, change=current - start)


def summarize_workouts(entries):
    """
    Session count, most frequent type and average duration.

    Ties on the most frequent type go to whichever type was seen first.
    """
    type_counts = {}
    total_duration = 0
    for entry in entries:
        type_counts[entry.type] = type_counts.get(entry.type, 0) + 1
        total_duration += entry.duration

    if not type_counts:
        return NO_DATA

    most_common_type = None
    max_count = 0
    for workout_type, count in type_counts.items():
        if count > max_count:
            most_common_type = workout_type
            max_count = count

    total = sum(type_counts.values())
    return WorkoutSummary(
        total=total,
        most_common_type=most_common_type,
        avg_duration=round_half_up(total_duration / total),
    )


def calorie_summary_display(summary) -> dict:
    if summary is NO_DATA:
        return {'average': PLACEHOLDER, 'highest': PLACEHOLDER, 'lowest': PLACEHOLDER}
    return asdict(summary)


def weight_summary_display(summary) -> dict:
    if summary is NO_DATA:
        return {'start': PLACEHOLDER, 'current': PLACEHOLDER, 'change': PLACEHOLDER}
    return {
        'start': f'{summary.start:.1f}',
        'current': f'{summary.current:.1f}',
        'change': f'{summary.change:.1f}',
    }


def workout_summary_display(summary) -> dict:
    if summary is NO_DATA:
        return {'total': 0, 'most_common': PLACEHOLDER, 'avg_duration': PLACEHOLDER}
    return {
        'total': summary.total,
        'most_common': summary.most_common_label,
        'avg_duration': summary.avg_duration,
    }


def summary_as_json(summary) -> Optional[dict]:
    """Raw numbers for API clients; None when there is no data."""
    if summary is NO_DATA:
        return None
    return {key: to_json_number(value) for key, value in asdict(summary).items()}


def weight_changes(entries):
    """
    Pair each weight entry with its change from the previous weigh-in.

    Returns (entry, change) tuples newest first, the way the weight history
    table lists them. The oldest entry has no previous and gets None.
    """
    ordered = sorted(entries, key=lambda entry: entry.date)
    rows = []
    previous = None
    for entry in ordered:
        change = None if previous is None else Decimal(entry.weight) - Decimal(previous.weight)
        rows.append((entry, change))
        previous = entry
    rows.reverse()
    return rows


def format_change(change) -> str:
    """'+1.2', '-0.4' or the placeholder."""
    if change is None:
        return PLACEHOLDER
    sign = '+' if change > 0 else '-' if change < 0 else ''
    return f'{sign}{abs(Decimal(change)):.1f}'
