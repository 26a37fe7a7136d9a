"""
Rolling time windows used by the list pages and the dashboard.

A window is anchored to the evaluation instant. Callers capture ``now`` once
(see ``fittrack.timezone_utils.TrackingContext``) and pass the same value for
every record kind they filter together.
"""
from datetime import date, datetime, timedelta

from .formatting import subtract_months

ALL_TIME = 'all'

# window name -> (unit, amount)
WINDOW_OFFSETS = {
    '7days': ('days', 7),
    '30days': ('days', 30),
    '3months': ('months', 3),
    '6months': ('months', 6),
    ALL_TIME: None,
}


def parse_window(name, default=ALL_TIME):
    """Validate a window name from a query string. Raises ValueError if unknown."""
    if name in (None, ''):
        return default
    if name not in WINDOW_OFFSETS:
        raise ValueError(
            f"Unknown window '{name}'. Expected one of: {', '.join(WINDOW_OFFSETS)}"
        )
    return name


def window_cutoff(window, now):
    """
    First calendar date included in ``window``, or None for all-time.
    """
    if window not in WINDOW_OFFSETS:
        raise ValueError(f"Unknown window '{window}'")
    offset = WINDOW_OFFSETS[window]
    if offset is None:
        return None

    today = now.date() if isinstance(now, datetime) else now
    unit, amount = offset
    if unit == 'days':
        return today - timedelta(days=amount)
    return subtract_months(today, amount)


def filter_by_window(records, window, now):
    """
    Keep the records whose ``date`` is on or after the window's cutoff.

    Input order is preserved. The 'all' window returns every record.
    """
    cutoff = window_cutoff(window, now)
    if cutoff is None:
        return list(records)
    return [record for record in records if _record_date(record) >= cutoff]


def _record_date(record) -> date:
    value = record.date
    if isinstance(value, datetime):
        return value.date()
    return value
