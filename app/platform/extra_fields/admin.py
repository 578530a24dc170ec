from django.contrib import admin

from .models import CourseField, UserField


class ExtraFieldAdmin(admin.ModelAdmin):
    list_display = ['field_variable', 'field_display_text', 'field_type', 'field_order', 'field_visible', 'field_changeable', 'field_filter']
    list_filter = ['field_type', 'field_visible', 'field_filter']
    search_fields = ['field_variable', 'field_display_text']
    ordering = ['field_order', 'id']


admin.site.register(CourseField, ExtraFieldAdmin)
admin.site.register(UserField, ExtraFieldAdmin)
