import pytest
from django.utils import timezone

from app.platform.extra_fields.models import CourseField, ExtraFieldBase, ExtraFieldType, UserField

pytestmark = pytest.mark.django_db


def test_base_is_abstract():
    assert ExtraFieldBase._meta.abstract is True
    assert CourseField._meta.db_table == "course_field"
    assert UserField._meta.db_table == "user_field"


def test_defaults():
    before = timezone.now()
    field = CourseField.objects.create(field_type=ExtraFieldType.TEXT, field_variable="room")

    field.refresh_from_db()
    assert field.field_display_text is None
    assert field.field_default_value is None
    assert field.field_order is None
    assert field.field_visible is None
    assert field.field_changeable is None
    assert field.field_filter is None
    assert field.tms >= before
    assert str(field) == "room"


def test_attributes_round_trip_through_storage():
    field = UserField.objects.create(
        field_type=ExtraFieldType.SELECT,
        field_variable="country",
        field_display_text="Country",
        field_default_value="BE",
        field_order=3,
        field_visible=True,
        field_changeable=False,
        field_filter=True,
    )

    field.field_display_text = "Country of residence"
    field.field_changeable = True
    field.save()

    stored = UserField.objects.get(pk=field.pk)
    assert stored.field_type == ExtraFieldType.SELECT == 4
    assert stored.get_field_type_display() == "Select"
    assert stored.field_display_text == "Country of residence"
    assert (stored.field_visible, stored.field_changeable, stored.field_filter) == (True, True, True)
    assert str(stored) == "Country of residence"


def test_ordered_by_field_order():
    CourseField.objects.create(field_type=ExtraFieldType.TEXT, field_variable="b", field_order=2)
    CourseField.objects.create(field_type=ExtraFieldType.TEXT, field_variable="a", field_order=1)

    assert list(CourseField.objects.values_list("field_variable", flat=True)) == ["a", "b"]


def test_tables_are_independent():
    CourseField.objects.create(field_type=ExtraFieldType.CHECKBOX, field_variable="certified")

    assert UserField.objects.count() == 0
    assert ExtraFieldType.TRIPLE_SELECT == 27
