"""
Extensible custom field definitions.

``ExtraFieldBase`` is the shared schema of every "<entity>_field" table; the
concrete tables add nothing but their own name. Values of these fields are
stored elsewhere and are not modelled here.
"""
from django.db import models
from django.utils import timezone


class ExtraFieldType(models.IntegerChoices):
    TEXT = 1, "Text"
    TEXTAREA = 2, "Textarea"
    RADIO = 3, "Radio"
    SELECT = 4, "Select"
    SELECT_MULTIPLE = 5, "Select multiple"
    DATE = 6, "Date"
    DATETIME = 7, "Date and time"
    DOUBLE_SELECT = 8, "Double select"
    DIVIDER = 9, "Divider"
    TAG = 10, "Tag"
    TIMEZONE = 11, "Timezone"
    SOCIAL_PROFILE = 12, "Social profile"
    CHECKBOX = 13, "Checkbox"
    MOBILE_PHONE_NUMBER = 14, "Mobile phone number"
    INTEGER = 15, "Integer"
    FILE_IMAGE = 16, "Image file"
    FLOAT = 17, "Float"
    FILE = 18, "File"
    VIDEO_URL = 19, "Video URL"
    LETTERS_ONLY = 20, "Letters only"
    ALPHANUMERIC = 21, "Alphanumeric"
    LETTERS_SPACE = 22, "Letters and spaces"
    ALPHANUMERIC_SPACE = 23, "Alphanumeric and spaces"
    GEOLOCALIZATION = 24, "Geolocalization"
    GEOLOCALIZATION_COORDINATES = 25, "Geolocalization coordinates"
    SELECT_WITH_TEXT_FIELD = 26, "Select with text field"
    TRIPLE_SELECT = 27, "Triple select"


class ExtraFieldBase(models.Model):
    field_type = models.IntegerField(choices=ExtraFieldType.choices)
    field_variable = models.CharField(max_length=64)
    field_display_text = models.CharField(max_length=64, null=True, blank=True)
    field_default_value = models.TextField(null=True, blank=True)
    field_order = models.IntegerField(null=True, blank=True)
    field_visible = models.BooleanField(null=True, blank=True)
    field_changeable = models.BooleanField(null=True, blank=True)
    field_filter = models.BooleanField(null=True, blank=True)
    tms = models.DateTimeField(default=timezone.now)

    class Meta:
        abstract = True
        ordering = ["field_order", "id"]

    def __str__(self):
        return self.field_display_text or self.field_variable


class CourseField(ExtraFieldBase):
    class Meta(ExtraFieldBase.Meta):
        db_table = "course_field"


class UserField(ExtraFieldBase):
    class Meta(ExtraFieldBase.Meta):
        db_table = "user_field"
