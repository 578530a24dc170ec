from django.apps import AppConfig


class ExtraFieldsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'app.platform.extra_fields'
    label = 'extra_fields'
    verbose_name = 'Extra Fields'
