"""Serializers for the plugin admin API."""
from rest_framework import serializers


class PluginSummarySerializer(serializers.Serializer):
    name = serializers.CharField()
    title = serializers.CharField()
    comment = serializers.CharField(allow_blank=True)
    version = serializers.CharField(allow_blank=True)
    author = serializers.CharField(allow_blank=True)
    plugin_class = serializers.CharField()
    is_course_plugin = serializers.BooleanField()
    is_admin_plugin = serializers.BooleanField()
    is_mail_plugin = serializers.BooleanField()
    enabled = serializers.BooleanField()


class CourseInstallSerializer(serializers.Serializer):
    course_id = serializers.IntegerField(min_value=1)
    add_tool_link = serializers.BooleanField(default=True)


class CourseUninstallSerializer(serializers.Serializer):
    course_id = serializers.IntegerField(min_value=1)
