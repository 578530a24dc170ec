import pytest

from app.courses.models import CourseSetting, CourseTool
from plugins.bbb.plugin import BbbPlugin


@pytest.fixture
def bbb_plugin():
    return BbbPlugin()


@pytest.mark.django_db
@pytest.mark.parametrize(
    "host, expected",
    [
        ("", None),
        ("bbb.example.com", "https://bbb.example.com/"),
        ("http://bbb.example.com/bigbluebutton", "http://bbb.example.com/bigbluebutton/"),
        ("https://bbb.example.com/", "https://bbb.example.com/"),
    ],
)
def test_server_url(bbb_plugin, plugin_setting, host, expected):
    if host:
        plugin_setting(bbb_plugin, "host", host)

    assert bbb_plugin.server_url() == expected


@pytest.mark.django_db
def test_disabling_the_tool_removes_course_fields(bbb_plugin, plugin_setting, courses):
    bbb_plugin.install_course_fields_in_all_courses()
    assert CourseTool.objects.filter(name="bbb").count() == 3

    plugin_setting(bbb_plugin, "tool_enable", "false")
    bbb_plugin.perform_actions_after_configure()

    assert not CourseTool.objects.filter(name="bbb").exists()
    assert not CourseSetting.objects.filter(variable__startswith="b").exists()


@pytest.mark.django_db
def test_enabled_tool_keeps_course_fields(bbb_plugin, plugin_setting, course):
    bbb_plugin.course_install(course.pk)
    plugin_setting(bbb_plugin, "tool_enable", "true")

    bbb_plugin.perform_actions_after_configure()

    assert CourseSetting.objects.filter(course=course).count() == 4
