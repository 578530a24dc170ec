"""Shared abstract models and mixins."""
from django.db import models
from django.utils import timezone


class TimestampedModel(models.Model):
    """Adds created/updated timestamps."""

    created_at = models.DateTimeField(default=timezone.now, editable=False)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True


class ActiveQuerySet(models.QuerySet):
    def active(self):
        return self.filter(active=True)


class ActivatableModel(models.Model):
    """Adds an ``active`` switch and an ``active()`` queryset filter."""

    active = models.BooleanField(default=True)

    objects = ActiveQuerySet.as_manager()

    class Meta:
        abstract = True
