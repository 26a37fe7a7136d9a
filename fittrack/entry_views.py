"""
JSON CRUD endpoints shared by the calorie, weight and workout apps.

Each app's urls.py routes to these views and passes its record kind as
``kind``, so /api/calories/, /api/weights/ and /api/workouts/ behave alike.
"""
import logging

from django.http import JsonResponse
from django.views.decorators.http import require_http_methods

from analytics.pages import PAGE_BUILDERS
from analytics.records import as_calendar_date
from analytics.windows import filter_by_window, parse_window

from .decorators import api_login_required, json_errors, parse_json_body
from .record_store import RecordStore, serialize_record
from .timezone_utils import build_context

logger = logging.getLogger(__name__)

store = RecordStore()


@require_http_methods(["GET"])
@api_login_required
@json_errors
def list_entries(request, kind):
    """All of the user's entries of one kind, newest first, optionally limited to ?window=."""
    window = parse_window(request.GET.get('window'))
    context = build_context(request)
    records = filter_by_window(store.list(context.user_id, kind), window, context.now)
    response = {
        'success': True,
        'window': window,
        'entries': [serialize_record(record) for record in records],
    }
    response.update(PAGE_BUILDERS[kind](records))
    return JsonResponse(response)


@require_http_methods(["GET"])
@api_login_required
@json_errors
def list_entries_in_range(request, kind, start, end):
    """Entries dated between two ISO dates inclusive, oldest first."""
    try:
        start_date = as_calendar_date(start)
        end_date = as_calendar_date(end)
    except ValueError:
        return JsonResponse({'success': False, 'error': 'Invalid date format'}, status=400)

    records = store.list_in_range(request.user.id, kind, start_date, end_date)
    return JsonResponse({
        'success': True,
        'start': start_date.isoformat(),
        'end': end_date.isoformat(),
        'entries': [serialize_record(record) for record in records],
    })


@require_http_methods(["POST"])
@api_login_required
@json_errors
def create_entry(request, kind):
    data = parse_json_body(request)
    record, created = store.create(request.user.id, kind, data)
    logger.info(f"{'Created' if created else 'Updated'} {kind} entry {record.id} for user {request.user.id}")
    return JsonResponse({
        'success': True,
        'created': created,
        'entry': serialize_record(record),
    }, status=201 if created else 200)


@require_http_methods(["GET"])
@api_login_required
@json_errors
def get_entry(request, kind, entry_id):
    record = store.get(request.user.id, kind, entry_id)
    return JsonResponse({'success': True, 'entry': serialize_record(record)})


@require_http_methods(["PATCH", "PUT"])
@api_login_required
@json_errors
def update_entry(request, kind, entry_id):
    data = parse_json_body(request)
    record = store.update(request.user.id, kind, entry_id, data)
    return JsonResponse({'success': True, 'entry': serialize_record(record)})


@require_http_methods(["DELETE"])
@api_login_required
@json_errors
def delete_entry(request, kind, entry_id):
    store.delete(request.user.id, kind, entry_id)
    logger.info(f"Deleted {kind} entry {entry_id} for user {request.user.id}")
    return JsonResponse({'success': True})
