import logging

from django.contrib.auth import login, logout
from django.http import JsonResponse
from django.views.decorators.csrf import ensure_csrf_cookie
from django.views.decorators.http import require_http_methods, require_POST

from fittrack.decorators import api_login_required, json_errors, parse_json_body

from .forms import LoginForm, RegisterForm

logger = logging.getLogger(__name__)


def serialize_user(user):
    return {
        'id': user.id,
        'username': user.username,
        'email': user.email,
        'full_name': user.get_full_name() or None,
        'date_joined': user.date_joined.isoformat(),
    }


def _form_errors(form):
    errors = {field: [str(message) for message in messages] for field, messages in form.errors.items()}
    first = next(iter(errors.values()))[0]
    return JsonResponse({'success': False, 'error': first, 'errors': errors}, status=400)


@require_POST
@json_errors
def register(request):
    """Create an account and start a session for it."""
    form = RegisterForm(parse_json_body(request))
    if not form.is_valid():
        return _form_errors(form)

    user = form.save()
    login(request, user, backend='django.contrib.auth.backends.ModelBackend')
    logger.info(f"Registered user {user.username}")
    return JsonResponse({'success': True, 'user': serialize_user(user)}, status=201)


@require_POST
@json_errors
def login_view(request):
    form = LoginForm(parse_json_body(request), request=request)
    if not form.is_valid():
        return _form_errors(form)

    user = form.cleaned_data['user']
    login(request, user)
    return JsonResponse({'success': True, 'user': serialize_user(user)})


@require_POST
def logout_view(request):
    logout(request)
    return JsonResponse({'success': True})


@require_http_methods(["GET"])
@ensure_csrf_cookie
@api_login_required
def me(request):
    return JsonResponse({'success': True, 'user': serialize_user(request.user)})
