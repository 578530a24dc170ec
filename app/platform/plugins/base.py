"""
Base class for plugins.

Every installable plugin extends ``Plugin``. It carries the plugin's identity
and declared settings fields, reads and writes its options in
``settings_current``, builds the settings form, resolves its own strings,
installs per-course settings plus a course tool link, and manages an optional
navigation tab.

Example::

    class AgendaPlugin(Plugin):
        is_course_plugin = True
        course_settings = [
            {"name": "agenda_enable", "type": "checkbox", "init_value": "true"},
        ]

        def __init__(self):
            super().__init__(
                name="agenda",
                label="Agenda",
                version="1.0",
                author="Coursehub",
                fields={"tool_enable": "boolean", "api_key": "text"},
            )
"""
import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from django.conf import settings
from django.db import transaction
from django.utils.translation import gettext

from app.courses.models import Course, CourseSetting, CourseTool
from app.platform.access_urls.scope import get_current_access_url_id
from app.platform.configuration.models import SettingsCurrent
from app.platform.configuration.services import (
    decode_value,
    encode_value,
    get_settings_params,
    get_settings_params_simple,
)

from . import tabs
from .constants import (
    COURSE_SETTING_CATEGORY,
    DEFAULT_COURSE_SETTING_TYPE,
    PLUGIN_CATEGORY,
    SETTING_TYPE,
    STATUS_INSTALLED,
    STATUS_VARIABLE,
    TAB_FILTER_NO_STUDENT,
    TAB_FILTER_ONLY_STUDENT,
)
from .fields import SelectField, parse_fields
from .lang import load_plugin_strings

logger = logging.getLogger(__name__)


def normalize_plugin_name(name: str) -> str:
    return "".join((name or "").split()).lower()


class Plugin:
    TAB_FILTER_NO_STUDENT = TAB_FILTER_NO_STUDENT
    TAB_FILTER_ONLY_STUDENT = TAB_FILTER_ONLY_STUDENT

    is_course_plugin = False
    is_admin_plugin = False
    is_mail_plugin = False
    # Adds an icon on the course home page
    add_course_tool = True

    # Settings added to every course the plugin is installed in, e.g.
    # [{"name": "bbb_welcome_message", "type": "text"},
    #  {"name": "bbb_record", "type": "checkbox", "group": "bbb_options"}]
    course_settings: List[Dict[str, Any]] = []
    # Whether changing a course setting should call course_settings_updated()
    course_settings_callback = False

    def __init__(self, name: str, version: str = "", author: str = "",
                 fields: Optional[Mapping] = None, label: Optional[str] = None):
        self.name = normalize_plugin_name(name)
        if not self.name:
            raise ValueError("A plugin needs a non-empty name")
        self.label = label or self.name
        self.version = version
        self.author = author
        self.fields = parse_fields(fields or {})

        self._settings: Optional[List[SettingsCurrent]] = None
        self._strings: Optional[Dict[str, str]] = None

    def __repr__(self):
        return f"<{self.__class__.__name__}(name='{self.name}', version='{self.version}')>"

    # ------------------------------------------------------------------
    # Metadata
    # ------------------------------------------------------------------
    @property
    def camel_case_name(self) -> str:
        return self.label

    @property
    def title(self) -> str:
        return self.get_lang("plugin_title")

    @property
    def comment(self) -> str:
        return self.get_lang("plugin_comment")

    @property
    def plugin_path(self) -> Path:
        return Path(settings.PLUGIN_ROOT) / self.name

    @property
    def index_url(self) -> str:
        return f"{settings.WEB_PATH}plugin/{self.name}/"

    def get_info(self) -> Dict[str, Any]:
        """Identity and flags, plus the settings form and current values when the plugin declares fields."""
        info = {
            "obj": self,
            "name": self.name,
            "title": self.title,
            "comment": self.comment,
            "version": self.version,
            "author": self.author,
            "plugin_class": f"{self.__class__.__module__}.{self.__class__.__qualname__}",
            "is_course_plugin": self.is_course_plugin,
            "is_admin_plugin": self.is_admin_plugin,
            "is_mail_plugin": self.is_mail_plugin,
        }

        if self.fields:
            info["settings_form"] = self.get_settings_form()
            for name, field in self.fields.items():
                if isinstance(field, SelectField):
                    info[name] = dict(field.options)
                else:
                    info[name] = self.get(name)

        return info

    def get_css(self) -> Optional[str]:
        """Contents of resources/<name>.css, or None when the file cannot be read."""
        path = self.plugin_path / "resources" / f"{self.name}.css"
        try:
            return path.read_text(encoding="utf-8")
        except OSError:
            return None

    # ------------------------------------------------------------------
    # Settings
    # ------------------------------------------------------------------
    def get_settings(self, force_reload: bool = False) -> List[SettingsCurrent]:
        """This plugin's rows for the current access URL, cached until an explicit reload."""
        if not self._settings or force_reload:
            self._settings = get_settings_params(
                subkey=self.name,
                category=PLUGIN_CATEGORY,
                type=SETTING_TYPE,
                access_url=get_current_access_url_id(),
            )
        return self._settings

    def get(self, option: str, default=None):
        """
        Value of ``option``: decoded list/dict for compound values, the raw
        string otherwise, ``default`` when the option has never been saved.
        """
        variable = f"{self.name}_{option}"
        for setting in self.get_settings():
            if setting.variable == variable:
                return decode_value(setting.selected_value)
        return default

    def save_settings(self, values: Mapping[str, Any]) -> List[str]:
        """Persist submitted values of declared fields; returns the option names written."""
        access_url = get_current_access_url_id()
        saved = []

        with transaction.atomic():
            for option, value in values.items():
                field = self.fields.get(option)
                if field is None or not field.stores_value:
                    continue
                SettingsCurrent.objects.update_or_create(
                    variable=f"{self.name}_{option}",
                    subkey=self.name,
                    category=PLUGIN_CATEGORY,
                    type=SETTING_TYPE,
                    access_url=access_url,
                    defaults={
                        "selected_value": encode_value(value),
                        "title": option,
                        "scope": "plugin",
                        "comment": None,
                    },
                )
                saved.append(option)

        logger.info(f"Saved {len(saved)} setting(s) for plugin '{self.name}' on access URL {access_url}")
        self.get_settings(force_reload=True)
        return saved

    def get_settings_form(self, data=None):
        from .forms import build_settings_form

        return build_settings_form(self, data=data)

    def is_enabled(self) -> bool:
        status = get_settings_params_simple(
            variable=STATUS_VARIABLE,
            subkey=self.name,
            category=PLUGIN_CATEGORY,
            type=SETTING_TYPE,
            access_url=get_current_access_url_id(),
        )
        return status is not None and status.selected_value == STATUS_INSTALLED

    # ------------------------------------------------------------------
    # Strings
    # ------------------------------------------------------------------
    def _get_strings(self) -> Dict[str, str]:
        if self._strings is None:
            self._strings = load_plugin_strings(self.name)
        return self._strings

    def lang_exists(self, key: str) -> bool:
        """True if the plugin's own string tables define ``key``."""
        return key in self._get_strings()

    def get_lang(self, key: str) -> str:
        strings = self._get_strings()
        if key in strings:
            return strings[key]
        return gettext(key)

    # ------------------------------------------------------------------
    # Courses
    # ------------------------------------------------------------------
    def course_install(self, course_id: int, add_tool_link: bool = True) -> bool:
        return self.install_course_fields(course_id, add_tool_link)

    def install_course_fields(self, course_id: int, add_tool_link: bool = True) -> bool:
        """
        Add the plugin's course settings to one course, first write wins, and
        unless told otherwise a tool link on the course home page.

        Returns False when ``course_id`` is empty; raises Course.DoesNotExist
        for an unknown course.
        """
        course_id = int(course_id or 0)
        if not course_id:
            return False
        course = Course.objects.get(pk=course_id)

        with transaction.atomic():
            for setting in self.course_settings:
                name = setting["name"]
                group = setting.get("group")
                lookup = {"variable": group, "subkey": name} if group else {"variable": name}
                if CourseSetting.objects.filter(course=course, **lookup).exists():
                    continue
                CourseSetting.objects.create(
                    course=course,
                    variable=group or name,
                    subkey=name if group else self.name,
                    value=setting.get("init_value", ""),
                    category=COURSE_SETTING_CATEGORY,
                    type=setting.get("type", DEFAULT_COURSE_SETTING_TYPE),
                    title="",
                )

            if add_tool_link and self.add_course_tool:
                self.create_link_to_course_tool(self.name, course.pk)

        logger.info(f"Installed plugin '{self.name}' course fields in course {course.pk}")
        return True

    def uninstall_course_fields(self, course_id: int) -> bool:
        """Remove the plugin's course settings and tool link from one course."""
        course_id = int(course_id or 0)
        if not course_id:
            return False

        with transaction.atomic():
            for variable in self.get_course_settings():
                CourseSetting.objects.filter(course_id=course_id, variable=variable).delete()
            CourseTool.objects.filter(course_id=course_id, name=self.name).delete()

        logger.info(f"Removed plugin '{self.name}' course fields from course {course_id}")
        return True

    def create_link_to_course_tool(self, name: str, course_id: int,
                                   icon_name: Optional[str] = None,
                                   link: Optional[str] = None) -> Optional[CourseTool]:
        if not self.add_course_tool:
            return None

        tool, created = CourseTool.objects.get_or_create(
            course_id=course_id,
            name=name,
            defaults={
                "link": link or f"{self.name}/start",
                "image": icon_name or f"{self.name}.png",
                "visibility": True,
                "admin": "0",
                "address": "squaregrey.gif",
                "added_tool": False,
                "target": "_self",
                "category": "plugin",
                "session_id": 0,
            },
        )
        if created:
            logger.debug(f"Created course tool '{name}' in course {course_id}")
        return tool

    def install_course_fields_in_all_courses(self, add_tool_link: bool = True) -> int:
        """One course at a time in id order; a failure stops the loop and keeps earlier courses installed."""
        count = 0
        for course_id in Course.objects.order_by("id").values_list("id", flat=True):
            self.install_course_fields(course_id, add_tool_link)
            count += 1
        return count

    def uninstall_course_fields_in_all_courses(self) -> int:
        count = 0
        for course_id in Course.objects.order_by("id").values_list("id", flat=True):
            self.uninstall_course_fields(course_id)
            count += 1
        return count

    def get_course_settings(self) -> List[str]:
        """Distinct course-setting variables owned by the plugin (group names or setting names)."""
        variables = []
        for setting in self.course_settings:
            variable = setting.get("group") or setting.get("name")
            if variable and variable not in variables:
                variables.append(variable)
        return variables

    def course_settings_updated(self, values: Optional[Mapping] = None):
        """Hook called after a course saves its settings when ``course_settings_callback`` is set."""

    def validate_course_setting(self, variable: str) -> bool:
        return True

    # ------------------------------------------------------------------
    # Tabs
    # ------------------------------------------------------------------
    def add_tab(self, tab_name: str, url: str, user_filter: Optional[str] = None) -> Optional[SettingsCurrent]:
        return tabs.add_tab(tab_name, url, user_filter)

    def delete_tab(self, key: str) -> int:
        return tabs.delete_tab(key)

    def update_tab(self, key: str, **attributes) -> int:
        return tabs.update_tab(key, **attributes)

    def manage_tab(self, show_tab, file_path: str = "") -> bool:
        """
        Show or hide the plugin's main menu tab.

        Returns True when a tab was just added, meaning the page must be
        reloaded for the new tab to appear.
        """
        url = f"plugin/{self.name}/{file_path}"

        if show_tab is True or show_tab == "true":
            return self.add_tab(self.label, url) is not None

        tab = tabs.find_tab(self.label, url)
        if tab is not None:
            self.delete_tab(tab.subkey)
        return False

    # ------------------------------------------------------------------
    # Lifecycle hooks
    # ------------------------------------------------------------------
    def install(self):
        """Called once when the plugin is installed on an access URL."""

    def uninstall(self):
        """Called once when the plugin is removed from an access URL."""

    def render_region(self, region: str) -> str:
        return ""

    def perform_actions_after_configure(self):
        """Called after the settings form has been saved."""
        return self
