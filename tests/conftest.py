import pytest
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient

from app.courses.models import Course
from app.platform.access_urls.scope import clear_current_access_url_id
from app.platform.configuration.models import SettingsCurrent
from tests.demo_plugins import AgendaPlugin, DemoPlugin


@pytest.fixture(autouse=True)
def reset_access_url_scope():
    yield
    clear_current_access_url_id()


@pytest.fixture
def demo_plugin():
    return DemoPlugin()


@pytest.fixture
def agenda_plugin():
    return AgendaPlugin()


@pytest.fixture
def course(db):
    return Course.objects.create(code="MATH101", title="Mathematics")


@pytest.fixture
def courses(db):
    return [
        Course.objects.create(code=f"C{index}", title=f"Course {index}")
        for index in range(1, 4)
    ]


@pytest.fixture
def plugin_setting(db):
    """Create a saved option row the way the settings page stores it."""

    def _create(plugin, option, value, access_url=1, **extra):
        return SettingsCurrent.objects.create(
            variable=f"{plugin.name}_{option}",
            subkey=plugin.name,
            category="Plugins",
            type="setting",
            selected_value=value,
            title=extra.pop("title", option),
            access_url=access_url,
            **extra,
        )

    return _create


@pytest.fixture
def api_admin(db):
    user = get_user_model().objects.create_superuser(
        username="admin", email="admin@example.com", password="admin-pass-123"
    )
    client = APIClient()
    client.force_authenticate(user=user)
    return client
