from django.contrib import admin

from .models import AccessUrl


@admin.register(AccessUrl)
class AccessUrlAdmin(admin.ModelAdmin):
    list_display = ['id', 'url', 'active', 'created_at']
    list_filter = ['active']
    search_fields = ['url', 'description']
