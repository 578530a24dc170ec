"""Plugin administration endpoints."""
import logging

from django.shortcuts import get_object_or_404
from rest_framework import viewsets, permissions, status
from rest_framework.decorators import action
from rest_framework.exceptions import ValidationError
from drf_spectacular.utils import extend_schema

from app.courses.models import Course
from app.utils.response import api_response
from .constants import SHOW_MAIN_MENU_TAB
from .registry import get_plugin, get_plugins, install_plugin, uninstall_plugin
from .serializers import (
    CourseInstallSerializer,
    CourseUninstallSerializer,
    PluginSummarySerializer,
)

logger = logging.getLogger(__name__)


def plugin_summary(plugin):
    return PluginSummarySerializer({
        "name": plugin.name,
        "title": plugin.title,
        "comment": plugin.comment,
        "version": plugin.version,
        "author": plugin.author,
        "plugin_class": f"{plugin.__class__.__module__}.{plugin.__class__.__qualname__}",
        "is_course_plugin": plugin.is_course_plugin,
        "is_admin_plugin": plugin.is_admin_plugin,
        "is_mail_plugin": plugin.is_mail_plugin,
        "enabled": plugin.is_enabled(),
    }).data


@extend_schema(tags=["Plugins"])
class PluginViewSet(viewsets.ViewSet):
    permission_classes = [permissions.IsAdminUser]
    lookup_field = "name"
    lookup_value_regex = r"[a-z0-9_]+"

    @extend_schema(
        summary="List plugins",
        description="All plugins offered by the platform with their status on the current access URL",
    )
    def list(self, request):
        data = [plugin_summary(plugin) for plugin in get_plugins()]
        return api_response(200, "success", {"plugins": data, "count": len(data)})

    @extend_schema(
        summary="Plugin details",
        description="Plugin information, current option values and the settings form description",
    )
    def retrieve(self, request, name=None):
        plugin = get_plugin(name)
        info = plugin.get_info()
        form = info.get("settings_form")

        data = plugin_summary(plugin)
        data["values"] = {
            option: plugin.get(option)
            for option, field in plugin.fields.items()
            if field.stores_value
        }
        data["settings_form"] = form.describe() if form is not None else None
        data["course_settings"] = plugin.get_course_settings()
        return api_response(200, "success", data)

    @extend_schema(
        summary="Save plugin settings",
        description=(
            "Validate and store the submitted options of the plugin settings form; options left out keep "
            "their saved value. `reload` tells the client to refresh the page"
        ),
    )
    @action(detail=True, methods=["post"], url_path="configure")
    def configure(self, request, name=None):
        plugin = get_plugin(name)
        form = plugin.get_settings_form(data=request.data)
        if not form.is_valid():
            raise ValidationError(form.errors)

        submitted = {
            option: value
            for option, value in form.cleaned_data.items()
            if option in request.data
        }
        saved = plugin.save_settings(submitted)
        logger.info(f"Plugin '{plugin.name}' configured by {request.user}")
        plugin.perform_actions_after_configure()

        reload = False
        if SHOW_MAIN_MENU_TAB in plugin.fields:
            reload = plugin.manage_tab(plugin.get(SHOW_MAIN_MENU_TAB))

        return api_response(200, "success", {"plugin": plugin.name, "saved": saved, "reload": reload})

    @extend_schema(summary="Install plugin on the current access URL")
    @action(detail=True, methods=["post"], url_path="install")
    def install(self, request, name=None):
        plugin = get_plugin(name)
        install_plugin(plugin)
        return api_response(200, "success", plugin_summary(plugin))

    @extend_schema(summary="Uninstall plugin from the current access URL")
    @action(detail=True, methods=["post"], url_path="uninstall")
    def uninstall(self, request, name=None):
        plugin = get_plugin(name)
        deleted = uninstall_plugin(plugin)
        data = plugin_summary(plugin)
        data["deleted_settings"] = deleted
        return api_response(200, "success", data)

    @extend_schema(
        summary="Install plugin course fields",
        request=CourseInstallSerializer,
    )
    @action(detail=True, methods=["post"], url_path="course-install")
    def course_install(self, request, name=None):
        plugin = get_plugin(name)
        serializer = CourseInstallSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        course = get_object_or_404(Course, pk=serializer.validated_data["course_id"])

        plugin.course_install(course.pk, serializer.validated_data["add_tool_link"])
        return api_response(
            status.HTTP_200_OK, "success",
            {"plugin": plugin.name, "course_id": course.pk, "course_settings": plugin.get_course_settings()},
        )

    @extend_schema(
        summary="Remove plugin course fields",
        request=CourseUninstallSerializer,
    )
    @action(detail=True, methods=["post"], url_path="course-uninstall")
    def course_uninstall(self, request, name=None):
        plugin = get_plugin(name)
        serializer = CourseUninstallSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        course = get_object_or_404(Course, pk=serializer.validated_data["course_id"])

        plugin.uninstall_course_fields(course.pk)
        return api_response(status.HTTP_200_OK, "success", {"plugin": plugin.name, "course_id": course.pk})
