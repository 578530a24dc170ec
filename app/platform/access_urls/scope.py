"""
Request-local access URL scope.

The middleware resolves the scope once per request; code running outside a
request (management commands, signals fired from scripts) falls back to
``settings.DEFAULT_ACCESS_URL_ID``.
"""
from asgiref.local import Local
from django.conf import settings

_state = Local()


def set_current_access_url_id(access_url_id):
    _state.access_url_id = access_url_id


def clear_current_access_url_id():
    if hasattr(_state, "access_url_id"):
        del _state.access_url_id


def get_current_access_url_id() -> int:
    return getattr(_state, "access_url_id", None) or settings.DEFAULT_ACCESS_URL_ID
