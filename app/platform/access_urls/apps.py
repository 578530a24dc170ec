from django.apps import AppConfig


class AccessUrlsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'app.platform.access_urls'
    label = 'access_urls'
    verbose_name = 'Access URLs'
