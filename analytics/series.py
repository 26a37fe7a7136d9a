"""
Chart-ready series built from record snapshots.

Every function returns plain SeriesPoint / CorrelationPoint lists in
chronological order; turning them into a specific charting library's format
is left to the caller (see ``chart_payload``).
"""
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from operator import attrgetter
from typing import Any, Optional

from .formatting import end_of_month, short_date_label, start_of_week, subtract_months, to_json_number

TIMEFRAMES = ('daily', 'weekly', 'monthly', 'yearly')

COUNT = 'count'
SUM = 'sum'
LAST = 'last'

WEEKDAY_LABELS = ['Mon', 'Tue', 'Wed', 'Thu', 'Fri', 'Sat', 'Sun']


@dataclass(frozen=True)
class SeriesPoint:
    label: str
    value: Any


@dataclass(frozen=True)
class CorrelationPoint:
    date: date
    x: Any
    y: Any


@dataclass(frozen=True)
class Bucket:
    key: Any
    label: str


def _getter(spec):
    if spec is None or callable(spec):
        return spec
    return attrgetter(spec)


def _as_date(value):
    return value.date() if isinstance(value, datetime) else value


def timeframe_range(timeframe, now):
    """
    (start, end) calendar dates covered by a statistics timeframe.

    daily: today. weekly: Monday..Sunday of this week. monthly: the first of
    last month through the end of this month. yearly: this calendar year.
    """
    today = _as_date(now)
    if timeframe == 'daily':
        return today, today
    if timeframe == 'weekly':
        start = start_of_week(today)
        return start, start + timedelta(days=6)
    if timeframe == 'monthly':
        start = subtract_months(today.replace(day=1), 1)
        return start, end_of_month(today)
    if timeframe == 'yearly':
        return date(today.year, 1, 1), date(today.year, 12, 31)
    raise ValueError(f"Unknown timeframe '{timeframe}'. Expected one of: {', '.join(TIMEFRAMES)}")


def _buckets(timeframe, start, end):
    if timeframe == 'daily':
        return [Bucket((start, hour), f'{hour:02d}:00') for hour in range(24)]
    if timeframe == 'weekly':
        return [Bucket(start + timedelta(days=i), (start + timedelta(days=i)).strftime('%a')) for i in range(7)]
    if timeframe == 'monthly':
        buckets = []
        week = start_of_week(start)
        while week <= end:
            buckets.append(Bucket(week, short_date_label(week)))
            week += timedelta(days=7)
        return buckets
    return [Bucket((start.year, month), date(start.year, month, 1).strftime('%b')) for month in range(1, 13)]


def _localize(value, tz):
    if tz is not None and isinstance(value, datetime) and value.tzinfo is not None:
        return value.astimezone(tz)
    return value


def local_date(value, tz=None):
    """Calendar date of a date or datetime, as seen in ``tz``."""
    return _as_date(_localize(value, tz))


def filter_to_range(entries, date_field, start, end, tz=None):
    """Entries whose ``date_field`` falls within start..end (inclusive) in ``tz``."""
    get_date = attrgetter(date_field)
    return [
        entry for entry in entries
        if get_date(entry) is not None and start <= local_date(get_date(entry), tz) <= end
    ]


def _bucket_key(timeframe, value):
    # ``value`` is already localized
    if timeframe == 'daily':
        if isinstance(value, datetime):
            return value.date(), value.hour
        return value, 0
    day = _as_date(value)
    if timeframe == 'weekly':
        return day
    if timeframe == 'monthly':
        return start_of_week(day)
    return day.year, day.month


def bucket_for_chart(entries, date_field, timeframe, now, value=None, how=COUNT):
    """
    Group entries into the fixed buckets of ``timeframe``.

    Args:
        entries: record snapshots.
        date_field: attribute holding the date to bucket on. The daily
            timeframe buckets by hour, so pass a datetime field
            (e.g. 'created_at') for it.
        timeframe: 'daily', 'weekly', 'monthly' or 'yearly'.
        now: evaluation instant; its date anchors the range and, when it is
            timezone-aware, its tzinfo is used to localize datetimes.
        value: attribute name or callable giving the number to aggregate.
            Unused for counts.
        how: 'count' or 'sum' (empty buckets are 0) or 'last' (the
            latest observation in the bucket; empty buckets are None so
            charts can draw a gap).

    Returns:
        One SeriesPoint per bucket, oldest first.
    """
    if how not in (COUNT, SUM, LAST):
        raise ValueError(f"Unknown aggregation '{how}'")
    start, end = timeframe_range(timeframe, now)
    buckets = _buckets(timeframe, start, end)
    get_date = attrgetter(date_field)
    get_value = _getter(value)
    tz = now.tzinfo if isinstance(now, datetime) else None

    grouped = {bucket.key: [] for bucket in buckets}
    for entry in entries:
        raw = get_date(entry)
        if raw is None:
            continue
        local = _localize(raw, tz)
        day = _as_date(local)
        if day < start or day > end:
            continue
        key = _bucket_key(timeframe, local)
        if key in grouped:
            grouped[key].append(entry)

    return [
        SeriesPoint(bucket.label, _aggregate(grouped[bucket.key], how, get_value, get_date))
        for bucket in buckets
    ]


def _aggregate(members, how, get_value, get_date):
    if how == COUNT:
        return len(members)
    if how == SUM:
        return sum((get_value(member) or 0 for member in members), 0)
    ordered = sorted(members, key=get_date)
    return get_value(ordered[-1]) if ordered else None


def rolling_days(entries, now, days=7, date_field='date', value=None, how=COUNT):
    """
    One point per day for the ``days`` days ending on ``now``'s date,
    labelled by weekday ('Mon'). Empty days follow ``bucket_for_chart``:
    0 for counts and sums, None for 'last'.
    """
    if how not in (COUNT, SUM, LAST):
        raise ValueError(f"Unknown aggregation '{how}'")
    end = _as_date(now)
    start = end - timedelta(days=days - 1)
    get_date = attrgetter(date_field)
    get_value = _getter(value)
    tz = now.tzinfo if isinstance(now, datetime) else None

    grouped = {start + timedelta(days=i): [] for i in range(days)}
    for entry in filter_to_range(entries, date_field, start, end, tz):
        grouped[local_date(get_date(entry), tz)].append(entry)

    return [
        SeriesPoint(day.strftime('%a'), _aggregate(members, how, get_value, get_date))
        for day, members in grouped.items()
    ]


def correlate(left, right, x_value, y_value, match_key=None):
    """
    Pair up two record lists on calendar date (an inner join).

    Dates present in only one list are dropped, not imputed. When ``right``
    holds several entries for a date, the last one in iteration order is
    used. Each matching ``left`` entry yields one point; points are ordered
    by date.
    """
    get_key = _getter(match_key) or (lambda entry: _as_date(entry.date))
    get_x = _getter(x_value)
    get_y = _getter(y_value)

    right_by_key = {}
    for entry in right:
        right_by_key[get_key(entry)] = get_y(entry)

    points = [
        CorrelationPoint(date=get_key(entry), x=get_x(entry), y=right_by_key[get_key(entry)])
        for entry in left
        if get_key(entry) in right_by_key
    ]
    return sorted(points, key=attrgetter('date'))


def count_by_category(entries, key='type', label=None):
    """Occurrences per category, in first-encountered order."""
    get_category = _getter(key)
    counts = {}
    for entry in entries:
        category = get_category(entry)
        counts[category] = counts.get(category, 0) + 1
    return [
        SeriesPoint(label(category) if label else category, count)
        for category, count in counts.items()
    ]


def weekday_counts(entries, date_field='date'):
    """Entries per day of week, Monday first."""
    get_date = attrgetter(date_field)
    counts = [0] * 7
    for entry in entries:
        counts[_as_date(get_date(entry)).weekday()] += 1
    return [SeriesPoint(label, count) for label, count in zip(WEEKDAY_LABELS, counts)]


def entry_series(entries, *fields):
    """
    One point per entry, oldest first, for each requested field.

    Missing optional values (e.g. macros nobody logged) are drawn as 0.

    Returns:
        {'labels': [...], 'series': {field: [...]}}
    """
    ordered = sorted(entries, key=lambda entry: entry.date)
    return {
        'labels': [short_date_label(entry.date) for entry in ordered],
        'series': {
            name: [to_json_number(getattr(entry, name)) or 0 for entry in ordered]
            for name in fields
        },
    }


def chart_payload(points, label: Optional[str] = None):
    """Label-array / value-array pair consumed by the charting front end."""
    payload = {
        'labels': [point.label for point in points],
        'data': [to_json_number(point.value) for point in points],
    }
    if label:
        payload['label'] = label
    return payload


def correlation_payload(points, label='Calories vs Weight'):
    return {
        'label': label,
        'data': [
            {'date': point.date.isoformat(), 'x': to_json_number(point.x), 'y': to_json_number(point.y)}
            for point in points
        ],
    }
