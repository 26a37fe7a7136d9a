"""
Chart-ready data for the per-kind list pages.

Each builder takes the records already filtered to the selected window and
returns the summary block plus the charts that page draws.
"""
from .formatting import to_json_number
from .records import CALORIE, WEIGHT, WORKOUT, workout_type_label
from .series import chart_payload, count_by_category, entry_series, weekday_counts
from .summaries import (
    calorie_summary_display,
    format_change,
    summarize_calories,
    summarize_weights,
    summarize_workouts,
    summary_as_json,
    weight_changes,
    weight_summary_display,
    workout_summary_display,
)


def calorie_page(entries):
    summary = summarize_calories(entries)
    return {
        'summary': summary_as_json(summary),
        'display': calorie_summary_display(summary),
        'charts': {
            'intake': entry_series(entries, 'total_calories'),
            'macros': entry_series(entries, 'protein', 'carbs', 'fat'),
        },
    }


def weight_page(entries):
    summary = summarize_weights(entries)
    return {
        'summary': summary_as_json(summary),
        'display': weight_summary_display(summary),
        'history': [
            {
                'id': entry.id,
                'date': entry.date.isoformat(),
                'weight': to_json_number(entry.weight),
                'change': to_json_number(change),
                'change_display': format_change(change),
            }
            for entry, change in weight_changes(entries)
        ],
        'charts': {
            'progress': entry_series(entries, 'weight'),
        },
    }


def workout_page(entries):
    summary = summarize_workouts(entries)
    return {
        'summary': summary_as_json(summary),
        'display': workout_summary_display(summary),
        'charts': {
            'types': chart_payload(count_by_category(entries, 'type', workout_type_label), 'Workout Types'),
            'weekdays': chart_payload(weekday_counts(entries), 'Workouts'),
        },
    }


PAGE_BUILDERS = {
    CALORIE: calorie_page,
    WEIGHT: weight_page,
    WORKOUT: workout_page,
}
