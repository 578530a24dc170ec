"""Access URLs: the multi-tenant scopes settings are partitioned by."""
from django.db import models

from app.core.models import ActivatableModel, TimestampedModel


class AccessUrl(ActivatableModel, TimestampedModel):
    """One public entry point of the platform (a host name), e.g. http://campus.example.com/."""

    url = models.CharField(max_length=255, unique=True)
    description = models.TextField(blank=True)

    class Meta:
        db_table = "access_url"
        ordering = ["id"]

    def __str__(self):
        return self.url

    @property
    def host(self):
        """Host part of ``url`` without scheme, port or path."""
        host = self.url.split("://", 1)[-1]
        return host.split("/", 1)[0].split(":", 1)[0].lower()
