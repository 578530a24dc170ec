from django.contrib import admin

from .models import SettingsCurrent


@admin.register(SettingsCurrent)
class SettingsCurrentAdmin(admin.ModelAdmin):
    list_display = ['variable', 'subkey', 'category', 'selected_value', 'access_url']
    list_filter = ['category', 'access_url']
    search_fields = ['variable', 'subkey', 'title']
