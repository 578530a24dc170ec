"""
Custom navigation tabs.

A tab is a ``settings_current`` row with ``variable="show_tabs"`` and
``subkey="custom_tab_<n>[<filter>]"``. Slots are 1-based and recomputed on
every deletion, in storage (id) order.
"""
import logging
import re
from typing import Optional

from django.conf import settings
from django.db import transaction

from app.platform.configuration.models import SettingsCurrent

from .constants import (
    CUSTOM_TAB_PREFIX,
    TAB_FILTERS,
    TABS_CATEGORY,
    TABS_VARIABLE,
)

logger = logging.getLogger(__name__)


def custom_tabs(exclude_key: Optional[str] = None):
    tabs = SettingsCurrent.objects.filter(
        variable=TABS_VARIABLE,
        subkey__startswith=CUSTOM_TAB_PREFIX,
    ).order_by("id")
    if exclude_key is not None:
        tabs = tabs.exclude(subkey=exclude_key)
    return tabs


def tab_subkeytext(title: str) -> str:
    return "Tabs" + re.sub(r"\s+", "", title)


def tab_filter(subkey: str) -> str:
    """Student-visibility suffix carried by ``subkey`` ("" when none)."""
    for user_filter in TAB_FILTERS:
        if user_filter in subkey:
            return user_filter
    return ""


def find_tab(title: str, url: str) -> Optional[SettingsCurrent]:
    return SettingsCurrent.objects.filter(
        variable=TABS_VARIABLE,
        title=title,
        comment=url,
    ).order_by("id").first()


def add_tab(title: str, url: str, user_filter: Optional[str] = None) -> Optional[SettingsCurrent]:
    """
    Append a tab in the next free slot.

    Returns the created row, or None when a tab with the same title (ignoring
    whitespace) already exists. Unknown ``user_filter`` values are ignored.
    """
    subkeytext = tab_subkeytext(title)
    if SettingsCurrent.objects.filter(variable=TABS_VARIABLE, subkeytext=subkeytext).exists():
        logger.warning(f"Tab '{title}' already exists, not adding it again")
        return None

    subkey = f"{CUSTOM_TAB_PREFIX}{custom_tabs().count() + 1}"
    if user_filter in TAB_FILTERS:
        subkey += user_filter

    tab = SettingsCurrent.objects.create(
        variable=TABS_VARIABLE,
        subkey=subkey,
        type="checkbox",
        category=TABS_CATEGORY,
        selected_value="true",
        title=title,
        comment=url,
        subkeytext=subkeytext,
        access_url=settings.DEFAULT_ACCESS_URL_ID,
        access_url_changeable=False,
        access_url_locked=False,
    )
    logger.info(f"Added tab '{title}' as {subkey} -> {url}")
    return tab


def update_tab(key: str, **attributes) -> int:
    return SettingsCurrent.objects.filter(variable=TABS_VARIABLE, subkey=key).update(**attributes)


def delete_tab(key: str) -> int:
    """
    Remove tab ``key`` and renumber the other custom tabs 1..n, keeping each
    one's student-visibility suffix. Returns the number of rows deleted.
    """
    if not key:
        return 0

    with transaction.atomic():
        remaining = list(custom_tabs(exclude_key=key))
        deleted, _ = SettingsCurrent.objects.filter(variable=TABS_VARIABLE, subkey=key).delete()

        for slot, tab in enumerate(remaining, start=1):
            new_subkey = f"{CUSTOM_TAB_PREFIX}{slot}{tab_filter(tab.subkey)}"
            if new_subkey != tab.subkey:
                SettingsCurrent.objects.filter(pk=tab.pk).update(subkey=new_subkey)

    logger.info(f"Deleted tab {key}, {len(remaining)} custom tab(s) renumbered")
    return deleted
