"""
Storage keys shared by the plugin subsystem.
"""

# Plugin options and status rows in settings_current
PLUGIN_CATEGORY = "Plugins"
SETTING_TYPE = "setting"
STATUS_VARIABLE = "status"
STATUS_INSTALLED = "installed"

# Course settings written by course plugins
COURSE_SETTING_CATEGORY = "plugins"
DEFAULT_COURSE_SETTING_TYPE = "textfield"

# Navigation tabs
TABS_VARIABLE = "show_tabs"
TABS_CATEGORY = "Platform"
CUSTOM_TAB_PREFIX = "custom_tab_"
TAB_FILTER_NO_STUDENT = "::no-student"
TAB_FILTER_ONLY_STUDENT = "::only-student"
TAB_FILTERS = (TAB_FILTER_NO_STUDENT, TAB_FILTER_ONLY_STUDENT)

# Settings form
SHOW_MAIN_MENU_TAB = "show_main_menu_tab"
CHECKBOX_GROUP_LABEL = "sms_types"
SUBMIT_BUTTON_NAME = "submit_button"
