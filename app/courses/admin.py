from django.contrib import admin

from .models import Course, CourseSetting, CourseTool


@admin.register(Course)
class CourseAdmin(admin.ModelAdmin):
    list_display = ['id', 'code', 'title', 'created_at']
    search_fields = ['code', 'title']


@admin.register(CourseSetting)
class CourseSettingAdmin(admin.ModelAdmin):
    list_display = ['course', 'variable', 'subkey', 'value', 'category']
    list_filter = ['category']
    search_fields = ['variable', 'subkey']


@admin.register(CourseTool)
class CourseToolAdmin(admin.ModelAdmin):
    list_display = ['course', 'name', 'link', 'visibility', 'category']
    list_filter = ['category', 'visibility']
