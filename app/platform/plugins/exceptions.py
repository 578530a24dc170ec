class PluginError(Exception):
    """Base error of the plugin subsystem."""


class PluginNotFound(PluginError):
    def __init__(self, name):
        self.name = name
        super().__init__(f"Plugin not found: {name}")


class InvalidFieldDeclaration(PluginError, ValueError):
    """A settings field map entry names an unknown type or lacks its payload."""
