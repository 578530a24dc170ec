from django.apps import AppConfig


class ConfigurationConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'app.platform.configuration'
    label = 'configuration'
    verbose_name = 'Platform Settings'
