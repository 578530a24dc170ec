"""Read helpers and value codec for ``settings_current``."""
import json
from typing import List, Optional

from app.platform.access_urls.scope import get_current_access_url_id

from .models import SettingsCurrent


def get_settings_params(**filters) -> List[SettingsCurrent]:
    """All rows matching ``filters`` in storage order."""
    return list(SettingsCurrent.objects.filter(**filters).order_by("id"))


def get_settings_params_simple(**filters) -> Optional[SettingsCurrent]:
    """First row matching ``filters``, or None."""
    return SettingsCurrent.objects.filter(**filters).order_by("id").first()


def get_settings(category: str, access_url: Optional[int] = None) -> List[SettingsCurrent]:
    """Every setting of ``category`` visible from the given (or current) access URL."""
    if access_url is None:
        access_url = get_current_access_url_id()
    return get_settings_params(category=category, access_url=access_url)


def encode_value(value) -> str:
    """Storage form of a setting value: JSON for compound values, "true"/"false" for booleans."""
    if isinstance(value, (list, tuple, dict)):
        return json.dumps(value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return ""
    return str(value)


def decode_value(raw: Optional[str]):
    """
    Inverse of encode_value() for compound values.

    Only JSON arrays and objects are decoded; anything else (including JSON
    scalars such as "true" or "1") is returned as the raw string. A NULL
    column reads as "".
    """
    if raw is None:
        return ""
    if not raw:
        return raw
    try:
        decoded = json.loads(raw)
    except ValueError:
        return raw
    if isinstance(decoded, (list, dict)):
        return decoded
    return raw
