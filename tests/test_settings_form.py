import pytest
from django import forms

from app.platform.configuration.models import SettingsCurrent
from app.platform.plugins.exceptions import InvalidFieldDeclaration
from app.platform.plugins.fields import (
    BooleanField,
    HtmlField,
    SelectField,
    TextField,
    parse_field,
    parse_fields,
)
from app.platform.plugins.forms import StaticHtmlField

pytestmark = pytest.mark.django_db


def test_parse_fields_builds_typed_variants():
    parsed = parse_fields({
        "intro": "html",
        "name": None,
        "enabled": "boolean",
        "level": {"type": "select", "options": ["low", "high"]},
    })

    assert isinstance(parsed["intro"], HtmlField)
    assert isinstance(parsed["name"], TextField)
    assert isinstance(parsed["enabled"], BooleanField)
    assert parsed["level"] == SelectField(name="level", options={"low": "low", "high": "high"})
    assert parsed["intro"].help_key == "intro_help"


def test_parse_field_rejects_unknown_type():
    with pytest.raises(InvalidFieldDeclaration):
        parse_field("color", "colorpicker")


def test_parse_field_requires_select_options():
    with pytest.raises(InvalidFieldDeclaration):
        parse_field("mode", {"type": "select"})


def test_form_has_one_field_per_declaration(demo_plugin):
    form = demo_plugin.get_settings_form()

    assert list(form.fields) == [
        "intro", "description", "api_key", "tool_enable",
        "notify_email", "notify_sms", "mode", "show_main_menu_tab",
    ]
    assert form.field_kinds["mode"] == "select"
    assert form.form_name == "demo"


def test_form_field_widgets(demo_plugin):
    form = demo_plugin.get_settings_form()

    intro = form.fields["intro"]
    assert isinstance(intro, StaticHtmlField)
    assert intro.widget.render("intro", None) == "<p>Read the manual first.</p>"

    assert isinstance(form.fields["description"].widget, forms.Textarea)
    assert form.fields["description"].widget.attrs["class"] == "wysiwyg"

    tool_enable = form.fields["tool_enable"]
    assert isinstance(tool_enable.widget, forms.RadioSelect)
    assert [value for value, _ in tool_enable.choices] == ["true", "false"]

    mode = form.fields["mode"]
    assert list(mode.choices) == [("simple", "Simple"), ("advanced", "Advanced")]
    assert mode.widget.attrs == {"class": "mode-select"}


def test_labels_and_help_texts(demo_plugin):
    form = demo_plugin.get_settings_form()

    assert form.fields["api_key"].label == "API key"
    assert form.fields["api_key"].help_text == "Key issued by the provider"
    assert form.fields["mode"].help_text == "How much to show"
    assert form.fields["tool_enable"].help_text == ""


def test_main_menu_tab_help_links_plugin_index(demo_plugin):
    form = demo_plugin.get_settings_form()

    assert form.fields["show_main_menu_tab"].help_text == (
        'Or link it from the homepage: '
        '<a href="http://testserver/plugin/demo/">http://testserver/plugin/demo/</a>'
    )


def test_initial_values_come_from_saved_settings(demo_plugin, plugin_setting):
    plugin_setting(demo_plugin, "api_key", "saved-key")
    plugin_setting(demo_plugin, "mode", "advanced")

    form = demo_plugin.get_settings_form()

    assert form.initial["api_key"] == "saved-key"
    assert form.initial["mode"] == "advanced"
    assert form.initial["tool_enable"] is None
    assert "intro" not in form.initial


def test_checkboxes_share_one_group(demo_plugin):
    form = demo_plugin.get_settings_form()

    assert form.checkbox_group == ["notify_email", "notify_sms"]
    assert form.checkbox_group_label == "Notifications"
    assert form.submit_label == "Save settings"
    assert form.submit_name == "submit_button"


def test_checkbox_state_comes_from_all_plugin_settings(demo_plugin):
    SettingsCurrent.objects.create(
        variable="sms_notify_sms", subkey="sms", category="Plugins", type="setting",
        title="notify_sms", selected_value="true", access_url=1,
    )
    SettingsCurrent.objects.create(
        variable="sms_notify_email", subkey="sms", category="Plugins", type="setting",
        title="notify_email", selected_value="false", access_url=1,
    )

    form = demo_plugin.get_settings_form()

    assert form.initial["notify_sms"] is True
    assert form.initial["notify_email"] is False


def test_bound_form_validates_choices(demo_plugin):
    valid = demo_plugin.get_settings_form(data={"api_key": "k", "tool_enable": "true", "mode": "simple"})
    invalid = demo_plugin.get_settings_form(data={"mode": "expert"})

    assert valid.is_valid(), valid.errors
    assert valid.cleaned_data["tool_enable"] == "true"
    assert valid.cleaned_data["notify_sms"] is False
    assert not invalid.is_valid()
    assert "mode" in invalid.errors


def test_describe(demo_plugin, plugin_setting):
    plugin_setting(demo_plugin, "api_key", "saved-key")

    described = demo_plugin.get_settings_form().describe()

    assert described["name"] == "demo"
    fields = {entry["name"]: entry for entry in described["fields"]}
    assert fields["api_key"] == {
        "name": "api_key",
        "kind": "text",
        "label": "API key",
        "help": "Key issued by the provider",
        "initial": "saved-key",
    }
    assert fields["intro"]["html"] == "<p>Read the manual first.</p>"
    assert fields["mode"]["choices"][1] == {"value": "advanced", "label": "Advanced"}
    assert described["checkbox_group"] == {
        "label": "Notifications",
        "fields": ["notify_email", "notify_sms"],
    }
    assert described["submit"] == {"name": "submit_button", "label": "Save settings"}


def test_form_for_plugin_without_fields(agenda_plugin):
    form = agenda_plugin.get_settings_form()

    assert list(form.fields) == []
    assert form.describe()["checkbox_group"] is None
