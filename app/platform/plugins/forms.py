"""Settings form generated from a plugin's declared fields."""
from django import forms
from django.utils.html import format_html
from django.utils.safestring import mark_safe
from django.utils.translation import gettext

from app.platform.configuration.services import get_settings

from .constants import (
    CHECKBOX_GROUP_LABEL,
    PLUGIN_CATEGORY,
    SHOW_MAIN_MENU_TAB,
    SUBMIT_BUTTON_NAME,
)
from .fields import (
    BooleanField,
    CheckboxField,
    HtmlField,
    SelectField,
    TextField,
    WysiwygField,
)


class StaticHtmlWidget(forms.Widget):
    """Renders a fixed block of markup instead of an input."""

    def __init__(self, html="", attrs=None):
        super().__init__(attrs)
        self.html = html

    def render(self, name, value, attrs=None, renderer=None):
        return mark_safe(self.html)

    def value_from_datadict(self, data, files, name):
        return None


class StaticHtmlField(forms.Field):
    def __init__(self, html="", **kwargs):
        kwargs.setdefault("required", False)
        kwargs.setdefault("disabled", True)
        kwargs.setdefault("label", "")
        super().__init__(widget=StaticHtmlWidget(html), **kwargs)


class PluginSettingsForm(forms.Form):
    """
    Settings form of one plugin.

    Fields are attached by build_settings_form(); ``field_kinds`` records the
    declared kind of every field and ``checkbox_group`` the names rendered
    together under ``checkbox_group_label``.
    """

    def __init__(self, *args, plugin_name="", **kwargs):
        super().__init__(*args, **kwargs)
        self.form_name = plugin_name
        self.field_kinds = {}
        self.checkbox_group = []
        self.checkbox_group_label = ""
        self.submit_name = SUBMIT_BUTTON_NAME
        self.submit_label = ""

    def describe(self):
        """Plain-data description of the form, for API clients that render it themselves."""
        described = []
        for name, field in self.fields.items():
            entry = {
                "name": name,
                "kind": self.field_kinds.get(name, ""),
                "label": str(field.label or ""),
                "help": str(field.help_text or "") or None,
                "initial": self.get_initial_for_field(field, name),
            }
            if isinstance(field, StaticHtmlField):
                entry["html"] = field.widget.html
            if isinstance(field, forms.ChoiceField):
                entry["choices"] = [
                    {"value": value, "label": str(label)} for value, label in field.choices
                ]
                entry["attributes"] = dict(field.widget.attrs)
            described.append(entry)

        return {
            "name": self.form_name,
            "fields": described,
            "checkbox_group": {
                "label": self.checkbox_group_label,
                "fields": list(self.checkbox_group),
            } if self.checkbox_group else None,
            "submit": {"name": self.submit_name, "label": self.submit_label},
        }


def _help_text(plugin, field):
    if not plugin.lang_exists(field.help_key):
        return ""
    help_text = plugin.get_lang(field.help_key)
    if field.name == SHOW_MAIN_MENU_TAB:
        link = format_html('<a href="{0}">{0}</a>', plugin.index_url)
        help_text = help_text.replace("%s", link, 1)
    return help_text


def _checked_checkboxes(checkbox_names):
    """
    Names of checkbox options currently on.

    Read from every plugin setting of the current access URL whose title is
    the option name, not only from this plugin's own rows.
    """
    if not checkbox_names:
        return set()
    return {
        setting.title
        for setting in get_settings(PLUGIN_CATEGORY)
        if setting.title in checkbox_names and setting.selected_value == "true"
    }


def build_settings_form(plugin, data=None):
    checkbox_names = [name for name, field in plugin.fields.items() if isinstance(field, CheckboxField)]
    checked = _checked_checkboxes(checkbox_names)

    form = PluginSettingsForm(data=data, plugin_name=plugin.name)

    for name, field in plugin.fields.items():
        label = plugin.get_lang(name)
        help_text = _help_text(plugin, field)

        if isinstance(field, HtmlField):
            form_field = StaticHtmlField(html=label)
        elif isinstance(field, WysiwygField):
            form_field = forms.CharField(
                label=label,
                required=False,
                widget=forms.Textarea(attrs={"class": "wysiwyg"}),
            )
        elif isinstance(field, TextField):
            form_field = forms.CharField(label=label, help_text=help_text, required=False)
        elif isinstance(field, BooleanField):
            form_field = forms.ChoiceField(
                label=label,
                help_text=help_text,
                required=False,
                choices=[("true", gettext("Yes")), ("false", gettext("No"))],
                widget=forms.RadioSelect,
            )
        elif isinstance(field, CheckboxField):
            form_field = forms.BooleanField(label=label, required=False)
            form.checkbox_group.append(name)
        elif isinstance(field, SelectField):
            form_field = forms.ChoiceField(
                label=label,
                help_text=help_text,
                required=False,
                choices=list(field.options.items()),
                widget=forms.Select(attrs=dict(field.attributes)),
            )
        else:
            continue

        form.fields[name] = form_field
        form.field_kinds[name] = field.kind

        if isinstance(field, CheckboxField):
            form.initial[name] = name in checked
        elif field.stores_value:
            form.initial[name] = plugin.get(name)

    if form.checkbox_group:
        form.checkbox_group_label = plugin.get_lang(CHECKBOX_GROUP_LABEL)
    form.submit_label = plugin.get_lang("Save")

    return form
