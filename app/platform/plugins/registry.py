"""
Plugins offered by the platform.

``settings.PLUGINS`` lists plugin classes by dotted path. Every lookup returns
a fresh instance, so caches never outlive the caller that asked for it.
"""
import logging
from typing import List, Type

from django.conf import settings
from django.db import transaction
from django.utils.module_loading import import_string

from app.platform.access_urls.scope import get_current_access_url_id
from app.platform.configuration.models import SettingsCurrent

from .base import Plugin
from .constants import PLUGIN_CATEGORY, SETTING_TYPE, STATUS_INSTALLED, STATUS_VARIABLE
from .exceptions import PluginError, PluginNotFound

logger = logging.getLogger(__name__)


def get_plugin_classes() -> List[Type[Plugin]]:
    classes = []
    for path in getattr(settings, "PLUGINS", []):
        plugin_class = import_string(path)
        if not issubclass(plugin_class, Plugin):
            raise PluginError(f"{path} is not a Plugin subclass")
        classes.append(plugin_class)
    return classes


def get_plugins() -> List[Plugin]:
    return [plugin_class() for plugin_class in get_plugin_classes()]


def get_plugin(name: str) -> Plugin:
    for plugin in get_plugins():
        if plugin.name == name:
            return plugin
    raise PluginNotFound(name)


def get_enabled_plugins() -> List[Plugin]:
    return [plugin for plugin in get_plugins() if plugin.is_enabled()]


def install_plugin(plugin: Plugin) -> SettingsCurrent:
    """Mark ``plugin`` installed on the current access URL and run its install hook."""
    access_url = get_current_access_url_id()
    with transaction.atomic():
        status, _ = SettingsCurrent.objects.update_or_create(
            variable=STATUS_VARIABLE,
            subkey=plugin.name,
            category=PLUGIN_CATEGORY,
            type=SETTING_TYPE,
            access_url=access_url,
            defaults={"selected_value": STATUS_INSTALLED, "title": plugin.name},
        )
        plugin.install()
    logger.info(f"Installed plugin '{plugin.name}' on access URL {access_url}")
    return status


def uninstall_plugin(plugin: Plugin) -> int:
    """Run the uninstall hook and drop the plugin's status and option rows on the current access URL."""
    access_url = get_current_access_url_id()
    with transaction.atomic():
        plugin.uninstall()
        deleted, _ = SettingsCurrent.objects.filter(
            subkey=plugin.name,
            category=PLUGIN_CATEGORY,
            type=SETTING_TYPE,
            access_url=access_url,
        ).delete()
    logger.info(f"Uninstalled plugin '{plugin.name}' from access URL {access_url} ({deleted} row(s) removed)")
    return deleted
