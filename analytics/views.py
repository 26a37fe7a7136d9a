import logging

from django.conf import settings
from django.http import JsonResponse
from django.views.decorators.http import require_http_methods

from fittrack.decorators import api_login_required, json_errors
from fittrack.exporting import build_export, export_filename
from fittrack.record_store import RecordStore
from fittrack.timezone_utils import build_context

from .activity import merge_recent_activity
from .dashboard import dashboard_metrics, weekly_progress
from .formatting import relative_date_label
from .records import workout_type_label
from .series import (
    COUNT,
    LAST,
    SUM,
    bucket_for_chart,
    chart_payload,
    correlate,
    correlation_payload,
    count_by_category,
    filter_to_range,
    timeframe_range,
)
from .summaries import summarize_calories, summarize_weights, summarize_workouts, summary_as_json

logger = logging.getLogger(__name__)

store = RecordStore()

DEFAULT_TIMEFRAME = 'weekly'


def _activity_payload(records, context, limit):
    items = merge_recent_activity(records.calories, records.weights, records.workouts, limit=limit)
    feed = []
    for item in items:
        data = item.as_dict()
        data['when'] = relative_date_label(item.date, context.today)
        feed.append(data)
    return feed


def _parse_limit(raw):
    if raw in (None, ''):
        return settings.FITTRACK_RECENT_ACTIVITY_LIMIT
    try:
        limit = int(raw)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid limit '{raw}'")
    if limit < 0:
        raise ValueError("Limit must not be negative")
    return limit


@require_http_methods(["GET"])
@api_login_required
@json_errors
def dashboard(request):
    """Summary cards, the weekly progress chart and the recent activity feed."""
    context = build_context(request)
    records = store.snapshot(context.user_id)
    return JsonResponse({
        'success': True,
        'date': context.today.isoformat(),
        'cards': dashboard_metrics(context, records.calories, records.weights, records.workouts),
        'weekly_progress': weekly_progress(context, records.calories, records.weights),
        'recent_activity': _activity_payload(records, context, settings.FITTRACK_RECENT_ACTIVITY_LIMIT),
    })


@require_http_methods(["GET"])
@api_login_required
@json_errors
def statistics(request):
    """Bucketed charts and summaries for ?timeframe=daily|weekly|monthly|yearly."""
    timeframe = request.GET.get('timeframe') or DEFAULT_TIMEFRAME
    context = build_context(request)
    start, end = timeframe_range(timeframe, context.now)
    records = store.snapshot(context.user_id)

    # The daily view buckets by hour, which only the logging time carries,
    # so it selects entries by when they were logged rather than their date.
    date_field = 'created_at' if timeframe == 'daily' else 'date'

    def in_range(entries):
        return filter_to_range(entries, date_field, start, end, context.tz)

    calories = in_range(records.calories)
    weights = in_range(records.weights)
    workouts = in_range(records.workouts)

    charts = {
        'calories': chart_payload(
            bucket_for_chart(calories, date_field, timeframe, context.now, value='total_calories', how=SUM),
            'Calories',
        ),
        'weight': chart_payload(
            bucket_for_chart(weights, date_field, timeframe, context.now, value='weight', how=LAST),
            'Weight (kg)',
        ),
        'workouts': chart_payload(
            bucket_for_chart(workouts, date_field, timeframe, context.now, how=COUNT),
            'Workouts',
        ),
        'workout_minutes': chart_payload(
            bucket_for_chart(workouts, date_field, timeframe, context.now, value='duration', how=SUM),
            'Minutes',
        ),
        'workout_types': chart_payload(
            count_by_category(workouts, 'type', workout_type_label),
            'Workout Types',
        ),
        'calories_vs_weight': correlation_payload(
            correlate(calories, weights, 'total_calories', 'weight'),
        ),
    }

    return JsonResponse({
        'success': True,
        'timeframe': timeframe,
        'start': start.isoformat(),
        'end': end.isoformat(),
        'summaries': {
            'calories': summary_as_json(summarize_calories(calories)),
            'weight': summary_as_json(summarize_weights(weights)),
            'workouts': summary_as_json(summarize_workouts(workouts)),
        },
        'charts': charts,
    })


@require_http_methods(["GET"])
@api_login_required
@json_errors
def recent_activity(request):
    limit = _parse_limit(request.GET.get('limit'))
    context = build_context(request)
    records = store.snapshot(context.user_id)
    return JsonResponse({
        'success': True,
        'activity': _activity_payload(records, context, limit),
    })


@require_http_methods(["GET"])
@api_login_required
@json_errors
def export_data(request):
    """Download everything the user has logged as a JSON file."""
    context = build_context(request)
    document = build_export(store.snapshot(context.user_id), context.now)
    response = JsonResponse(document, json_dumps_params={'indent': 2})
    response['Content-Disposition'] = f'attachment; filename="{export_filename(context.now)}"'
    logger.info(f"Exported data for user {context.user_id}")
    return response
