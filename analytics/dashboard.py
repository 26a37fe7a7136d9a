"""
Headline metrics for the dashboard cards and its weekly progress chart.
"""
from dataclasses import dataclass
from decimal import Decimal

from django.conf import settings

from .formatting import PLACEHOLDER, round_half_up, to_json_number
from .series import LAST, SUM, rolling_days
from .summaries import NO_DATA, summarize_weights
from .windows import filter_by_window


@dataclass(frozen=True)
class Goals:
    daily_calories: int
    weight: Decimal
    weekly_workouts: int

    @classmethod
    def from_settings(cls):
        goals = settings.FITTRACK_GOALS
        return cls(
            daily_calories=int(goals['daily_calories']),
            weight=Decimal(str(goals['weight'])),
            weekly_workouts=int(goals['weekly_workouts']),
        )


def _percent(achieved, goal):
    if not goal:
        return 0
    return max(0, min(round_half_up(achieved / goal * 100), 100))


def _latest(entries):
    # Most recent day wins; on the same day the last one logged wins.
    if not entries:
        return None
    return max(entries, key=lambda entry: (entry.date, entry.created_at))


def dashboard_metrics(context, calorie_entries, weight_entries, workout_entries, goals=None):
    """
    The three summary cards: today's intake, weight progress and this week's sessions.

    ``context`` supplies the single evaluation instant used for the
    seven-day workout window.
    """
    goals = goals or Goals.from_settings()

    latest_calories = _latest(calorie_entries)
    calories_value = latest_calories.total_calories if latest_calories else None
    calories_progress = _percent(calories_value or 0, goals.daily_calories)

    weight_summary = summarize_weights(weight_entries)
    if weight_summary is NO_DATA:
        weight_value = None
        weight_progress = 0
        weight_change = PLACEHOLDER
    else:
        weight_value = weight_summary.current
        to_lose = weight_summary.start - goals.weight
        lost = weight_summary.start - weight_summary.current
        if to_lose == 0:
            weight_progress = 100 if weight_summary.current <= goals.weight else 0
        else:
            weight_progress = _percent(float(lost), float(to_lose))
        weight_change = f'{weight_summary.change:+.1f} total'

    weekly_workouts = len(filter_by_window(workout_entries, '7days', context.now))
    workouts_progress = _percent(weekly_workouts, goals.weekly_workouts)

    return [
        {
            'title': 'Daily Calories',
            'value': calories_value if calories_value is not None else PLACEHOLDER,
            'goal': goals.daily_calories,
            'progress': calories_progress,
            'achieved': f'{calories_progress}% achieved',
        },
        {
            'title': 'Current Weight',
            'value': to_json_number(weight_value) if weight_value is not None else PLACEHOLDER,
            'unit': 'kg',
            'goal': to_json_number(goals.weight),
            'progress': weight_progress,
            'change': weight_change,
        },
        {
            'title': 'Weekly Workouts',
            'value': weekly_workouts,
            'unit': 'sessions',
            'goal': goals.weekly_workouts,
            'progress': workouts_progress,
            'achieved': f'{workouts_progress}% achieved',
        },
    ]


def weekly_progress(context, calorie_entries, weight_entries):
    """
    The last seven days ending today: calories summed per day and the
    last weight logged each day (None where nothing was weighed).
    """
    calories = rolling_days(calorie_entries, context.now, value='total_calories', how=SUM)
    weights = rolling_days(weight_entries, context.now, value='weight', how=LAST)
    return {
        'labels': [point.label for point in calories],
        'calories': [to_json_number(point.value) for point in calories],
        'weight': [to_json_number(point.value) for point in weights],
    }
