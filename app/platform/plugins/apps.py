from django.apps import AppConfig


class PluginsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'app.platform.plugins'
    label = 'plugins'
    verbose_name = 'Plugins'

    def ready(self):
        from . import signals  # noqa: F401
