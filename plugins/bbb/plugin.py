"""
Videoconference plugin backed by a BigBlueButton server.
"""
from app.platform.plugins.base import Plugin


class BbbPlugin(Plugin):
    is_course_plugin = True

    course_settings = [
        {"name": "big_blue_button_welcome_message", "type": "text"},
        {"name": "big_blue_button_record_and_store", "type": "checkbox"},
        {"name": "bbb_enable_conference_in_groups", "type": "checkbox", "init_value": "false"},
        {"name": "bbb_force_record_generation", "type": "checkbox", "init_value": "false"},
    ]

    def __init__(self):
        super().__init__(
            name="bbb",
            label="Bbb",
            version="2.8",
            author="Coursehub team",
            fields={
                "tool_enable": "boolean",
                "host": "text",
                "salt": "text",
                "enable_global_conference": "boolean",
                "enable_conference_in_course_groups": "boolean",
                "interface": {
                    "type": "select",
                    "options": {"0": "Flash", "1": "HTML5"},
                },
                "show_main_menu_tab": "boolean",
            },
        )

    def server_url(self):
        """Configured server URL with a trailing slash, or None when the host option is empty."""
        host = self.get("host")
        if not host:
            return None
        if "://" not in host:
            host = f"https://{host}"
        return host if host.endswith("/") else f"{host}/"

    def perform_actions_after_configure(self):
        if self.get("tool_enable") == "false":
            self.uninstall_course_fields_in_all_courses()
        return self
