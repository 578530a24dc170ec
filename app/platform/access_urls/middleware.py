from django.conf import settings

from .models import AccessUrl
from .scope import clear_current_access_url_id, set_current_access_url_id


def resolve_access_url_id(host: str) -> int:
    """Id of the active AccessUrl serving ``host``, or the default scope."""
    host = (host or "").split(":", 1)[0].lower()
    for access_url in AccessUrl.objects.active():
        if access_url.host == host:
            return access_url.pk
    return settings.DEFAULT_ACCESS_URL_ID


class AccessUrlMiddleware:
    """Binds the access URL matching the request host for the duration of the request."""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        access_url_id = resolve_access_url_id(request.get_host())
        request.access_url_id = access_url_id
        set_current_access_url_id(access_url_id)
        try:
            return self.get_response(request)
        finally:
            clear_current_access_url_id()
