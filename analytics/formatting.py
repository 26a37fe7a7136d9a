"""
Date and number helpers shared by the aggregation modules.
"""
from calendar import monthrange
from datetime import date, datetime, timedelta
from decimal import ROUND_HALF_UP, Decimal

PLACEHOLDER = '-'


def round_half_up(value) -> int:
    """Round to the nearest integer, halves away from zero (2.5 -> 3, not banker's 2)."""
    return int(Decimal(str(value)).quantize(Decimal('1'), rounding=ROUND_HALF_UP))


def format_number(value) -> str:
    """Render a number without trailing zeros: Decimal('185.20') -> '185.2'."""
    if isinstance(value, Decimal):
        text = format(value.normalize(), 'f')
    elif isinstance(value, float) and value.is_integer():
        text = str(int(value))
    else:
        text = str(value)
    return text


def to_json_number(value):
    """Decimals become floats (or ints when whole) for JSON responses."""
    if value is None:
        return None
    if isinstance(value, Decimal):
        if value == value.to_integral_value():
            return int(value)
        return float(value)
    return value


def subtract_months(day: date, months: int) -> date:
    """
    Calendar-month subtraction, clamping to the last day of the target month.

    Jan 31 minus 3 months is Oct 31; May 31 minus 3 months is Feb 28 (or 29).
    """
    month_index = day.year * 12 + (day.month - 1) - months
    year, month = divmod(month_index, 12)
    month += 1
    last_day = monthrange(year, month)[1]
    return date(year, month, min(day.day, last_day))


def start_of_week(day: date) -> date:
    """Monday of the week containing ``day``."""
    return day - timedelta(days=day.weekday())


def end_of_month(day: date) -> date:
    return day.replace(day=monthrange(day.year, day.month)[1])


def short_date_label(day) -> str:
    """Chart label for a single day, e.g. 'Jan 05'."""
    return day.strftime('%b %d')


def relative_date_label(day: date, today: date) -> str:
    """'Today', 'Yesterday', or 'Jan 05, 2025'."""
    if isinstance(day, datetime):
        day = day.date()
    if day == today:
        return 'Today'
    if day == today - timedelta(days=1):
        return 'Yesterday'
    return day.strftime('%b %d, %Y')
