"""Courses and the per-course tables plugins write into."""
from django.db import models

from app.core.models import TimestampedModel


class Course(TimestampedModel):
    code = models.CharField(max_length=40, unique=True)
    title = models.CharField(max_length=250)

    class Meta:
        db_table = "course"
        ordering = ["id"]

    def __str__(self):
        return f"{self.title} ({self.code})"


class CourseSetting(models.Model):
    """
    Per-course configuration value.

    Grouped plugin settings use ``variable=<group>, subkey=<field>``;
    ungrouped ones use ``variable=<field>, subkey=<plugin name>``.
    """

    course = models.ForeignKey(Course, on_delete=models.CASCADE, related_name="settings", db_column="c_id")
    variable = models.CharField(max_length=255)
    subkey = models.CharField(max_length=255, null=True, blank=True)
    value = models.TextField(blank=True, default="")
    category = models.CharField(max_length=255, default="")
    type = models.CharField(max_length=255, default="textfield")
    title = models.CharField(max_length=255, default="", blank=True)

    class Meta:
        db_table = "c_course_setting"
        ordering = ["id"]
        indexes = [
            models.Index(fields=["course", "variable"]),
        ]

    def __str__(self):
        return f"{self.course_id}:{self.variable}[{self.subkey}]"


class CourseTool(models.Model):
    """Entry of a course home page tool list."""

    course = models.ForeignKey(Course, on_delete=models.CASCADE, related_name="tools", db_column="c_id")
    name = models.CharField(max_length=255)
    link = models.CharField(max_length=255)
    image = models.CharField(max_length=255, null=True, blank=True)
    visibility = models.BooleanField(default=True)
    admin = models.CharField(max_length=255, null=True, blank=True)
    address = models.CharField(max_length=255, null=True, blank=True)
    added_tool = models.BooleanField(default=False)
    target = models.CharField(max_length=20, default="_self")
    category = models.CharField(max_length=20, default="authoring")
    session_id = models.IntegerField(default=0)

    class Meta:
        db_table = "c_tool"
        ordering = ["id"]
        indexes = [
            models.Index(fields=["course", "name"]),
        ]

    def __str__(self):
        return f"{self.course_id}:{self.name}"
