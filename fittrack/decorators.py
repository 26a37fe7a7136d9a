import json
import logging
from functools import wraps

from django.http import JsonResponse

from .record_store import RecordNotFound, RecordOwnershipError, RecordValidationError

logger = logging.getLogger(__name__)


def api_login_required(view_func):
    """Like login_required, but answers API calls with a 401 instead of a redirect."""
    @wraps(view_func)
    def wrapper(request, *args, **kwargs):
        if not request.user.is_authenticated:
            return JsonResponse({'success': False, 'error': 'Authentication required'}, status=401)
        return view_func(request, *args, **kwargs)
    return wrapper


def json_errors(view_func):
    """Translate store and input errors raised by a view into JSON error responses."""
    @wraps(view_func)
    def wrapper(request, *args, **kwargs):
        try:
            return view_func(request, *args, **kwargs)
        except json.JSONDecodeError:
            return JsonResponse({'success': False, 'error': 'Invalid JSON'}, status=400)
        except RecordValidationError as e:
            return JsonResponse({'success': False, 'error': str(e), 'errors': e.errors}, status=400)
        except RecordOwnershipError as e:
            return JsonResponse({'success': False, 'error': str(e)}, status=403)
        except RecordNotFound as e:
            return JsonResponse({'success': False, 'error': str(e)}, status=404)
        except ValueError as e:
            return JsonResponse({'success': False, 'error': str(e)}, status=400)
        except Exception:
            logger.exception(f"Unhandled error in {view_func.__name__}")
            return JsonResponse({'success': False, 'error': 'Server error'}, status=500)
    return wrapper


def parse_json_body(request):
    """Decode a JSON request body; an empty body is an empty object."""
    if not request.body:
        return {}
    return json.loads(request.body)
