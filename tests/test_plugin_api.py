import pytest
from rest_framework.test import APIClient

from app.courses.models import CourseSetting, CourseTool
from app.platform.configuration.models import SettingsCurrent
from app.platform.plugins import tabs

pytestmark = pytest.mark.django_db


def test_requires_authentication():
    response = APIClient().get("/api/v1/plugins/")

    assert response.status_code == 401
    assert response.data["errorCode"] == "AUTH_ERROR"


def test_requires_admin(django_user_model):
    user = django_user_model.objects.create_user(username="teacher", password="teacher-pass-1")
    client = APIClient()
    client.force_authenticate(user=user)

    response = client.get("/api/v1/plugins/")

    assert response.status_code == 403
    assert response.data["errorCode"] == "PERMISSION_DENIED"


def test_list_plugins(api_admin):
    response = api_admin.get("/api/v1/plugins/")

    assert response.status_code == 200
    data = response.data["data"]
    assert data["count"] == 3
    assert [plugin["name"] for plugin in data["plugins"]] == ["bbb", "demo", "agenda"]
    demo = data["plugins"][1]
    assert demo["title"] == "Demo"
    assert demo["enabled"] is False
    assert demo["plugin_class"] == "tests.demo_plugins.DemoPlugin"


def test_retrieve_plugin(api_admin, plugin_setting, demo_plugin):
    plugin_setting(demo_plugin, "api_key", "saved")

    response = api_admin.get("/api/v1/plugins/demo/")

    assert response.status_code == 200
    data = response.data["data"]
    assert data["values"]["api_key"] == "saved"
    assert data["values"]["mode"] is None
    assert "intro" not in data["values"]
    assert data["course_settings"] == ["demo_welcome", "demo_display"]
    assert [field["name"] for field in data["settings_form"]["fields"]][:3] == ["intro", "description", "api_key"]


def test_retrieve_reports_saved_select_value(api_admin, demo_plugin):
    demo_plugin.save_settings({"mode": "advanced"})

    response = api_admin.get("/api/v1/plugins/demo/")

    data = response.data["data"]
    assert data["values"]["mode"] == "advanced"
    mode = next(field for field in data["settings_form"]["fields"] if field["name"] == "mode")
    assert mode["choices"] == [
        {"value": "simple", "label": "Simple"},
        {"value": "advanced", "label": "Advanced"},
    ]


def test_retrieve_plugin_without_fields(api_admin):
    response = api_admin.get("/api/v1/plugins/agenda/")

    assert response.status_code == 200
    assert response.data["data"]["settings_form"] is None
    assert response.data["data"]["values"] == {}


def test_unknown_plugin(api_admin):
    response = api_admin.get("/api/v1/plugins/unknown/")

    assert response.status_code == 404
    assert response.data["errorCode"] == "PLUGIN_NOT_FOUND"


def test_configure_saves_and_adds_tab(api_admin):
    response = api_admin.post(
        "/api/v1/plugins/demo/configure/",
        {
            "api_key": "k-1",
            "tool_enable": "true",
            "mode": "advanced",
            "notify_email": False,
            "notify_sms": True,
            "show_main_menu_tab": "true",
        },
        format="json",
    )

    assert response.status_code == 200
    assert response.data["data"]["reload"] is True
    assert SettingsCurrent.objects.get(variable="demo_api_key").selected_value == "k-1"
    assert SettingsCurrent.objects.get(variable="demo_mode").selected_value == "advanced"
    assert SettingsCurrent.objects.get(variable="demo_notify_sms").selected_value == "true"
    assert SettingsCurrent.objects.get(variable="demo_notify_email").selected_value == "false"
    assert tabs.find_tab("Demo", "plugin/demo/") is not None

    response = api_admin.post(
        "/api/v1/plugins/demo/configure/",
        {"show_main_menu_tab": "false"},
        format="json",
    )

    assert response.data["data"]["reload"] is False
    assert tabs.find_tab("Demo", "plugin/demo/") is None


def test_configure_keeps_options_left_out(api_admin, demo_plugin):
    demo_plugin.save_settings({"api_key": "secret", "mode": "advanced", "notify_sms": True})

    response = api_admin.post("/api/v1/plugins/demo/configure/", {"tool_enable": "true"}, format="json")

    assert response.status_code == 200
    assert response.data["data"]["saved"] == ["tool_enable"]
    assert SettingsCurrent.objects.get(variable="demo_api_key").selected_value == "secret"
    assert SettingsCurrent.objects.get(variable="demo_mode").selected_value == "advanced"
    assert SettingsCurrent.objects.get(variable="demo_notify_sms").selected_value == "true"
    assert SettingsCurrent.objects.get(variable="demo_tool_enable").selected_value == "true"


def test_configure_unchecks_checkbox_sent_as_false(api_admin, demo_plugin):
    demo_plugin.save_settings({"notify_sms": True})

    api_admin.post("/api/v1/plugins/demo/configure/", {"notify_sms": False}, format="json")

    assert SettingsCurrent.objects.get(variable="demo_notify_sms").selected_value == "false"


def test_configure_rejects_invalid_choice(api_admin):
    response = api_admin.post("/api/v1/plugins/demo/configure/", {"mode": "expert"}, format="json")

    assert response.status_code == 400
    assert response.data["errorCode"] == "VALIDATION_ERROR"
    assert response.data["errorMessage"].startswith("Mode:")
    assert not SettingsCurrent.objects.filter(subkey="demo").exists()


def test_install_and_uninstall(api_admin):
    response = api_admin.post("/api/v1/plugins/demo/install/")
    assert response.status_code == 200
    assert response.data["data"]["enabled"] is True

    response = api_admin.post("/api/v1/plugins/demo/uninstall/")
    assert response.status_code == 200
    assert response.data["data"]["enabled"] is False
    assert response.data["data"]["deleted_settings"] == 1


def test_course_install_and_uninstall(api_admin, course):
    response = api_admin.post(
        "/api/v1/plugins/demo/course-install/",
        {"course_id": course.pk, "add_tool_link": False},
        format="json",
    )

    assert response.status_code == 200
    assert CourseSetting.objects.filter(course=course).count() == 3
    assert not CourseTool.objects.filter(course=course).exists()

    response = api_admin.post(
        "/api/v1/plugins/demo/course-uninstall/",
        {"course_id": course.pk},
        format="json",
    )

    assert response.status_code == 200
    assert not CourseSetting.objects.filter(course=course).exists()


def test_course_install_unknown_course(api_admin):
    response = api_admin.post("/api/v1/plugins/demo/course-install/", {"course_id": 4242}, format="json")

    assert response.status_code == 404
    assert response.data["errorCode"] == "NOT_FOUND"


def test_course_install_invalid_payload(api_admin):
    response = api_admin.post("/api/v1/plugins/demo/course-install/", {"course_id": 0}, format="json")

    assert response.status_code == 400
    assert response.data["errorCode"] == "VALIDATION_ERROR"
