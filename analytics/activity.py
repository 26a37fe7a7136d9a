"""
Recent activity feed: the three record kinds merged into one list.
"""
from dataclasses import dataclass
from datetime import date, datetime

from .formatting import format_number
from .records import CALORIE, WEIGHT, WORKOUT

DEFAULT_LIMIT = 10


@dataclass(frozen=True)
class ActivityFeedItem:
    id: int
    kind: str
    date: date
    metric_label: str
    display_value: str
    # When the entry was logged, not the day it describes.
    sort_timestamp: datetime

    def as_dict(self):
        return {
            'id': self.id,
            'type': self.kind,
            'date': self.date.isoformat(),
            'metric': self.metric_label,
            'value': self.display_value,
            'created_at': self.sort_timestamp.isoformat(),
        }


def calorie_activity(entry):
    return ActivityFeedItem(
        id=entry.id,
        kind=CALORIE,
        date=entry.date,
        metric_label='Calories Log',
        display_value=f'{entry.total_calories} cal',
        sort_timestamp=entry.created_at,
    )


def weight_activity(entry):
    return ActivityFeedItem(
        id=entry.id,
        kind=WEIGHT,
        date=entry.date,
        metric_label='Weight Log',
        display_value=f'{format_number(entry.weight)} kg',
        sort_timestamp=entry.created_at,
    )


def workout_activity(entry):
    return ActivityFeedItem(
        id=entry.id,
        kind=WORKOUT,
        date=entry.date,
        metric_label=entry.type_label,
        display_value=f'{entry.duration} min',
        sort_timestamp=entry.created_at,
    )


def merge_recent_activity(calorie_entries, weight_entries, workout_entries, limit=DEFAULT_LIMIT):
    """
    Newest-logged first feed across all three kinds, cut to ``limit`` items.

    Items logged at the same instant keep their concatenation order
    (calories, then weights, then workouts).
    """
    items = (
        [calorie_activity(entry) for entry in calorie_entries]
        + [weight_activity(entry) for entry in weight_entries]
        + [workout_activity(entry) for entry in workout_entries]
    )
    # sorted() is stable, reverse=True included
    items = sorted(items, key=lambda item: item.sort_timestamp, reverse=True)
    if limit is None:
        return items
    return items[:max(limit, 0)]
