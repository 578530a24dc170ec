"""
Platform key/value settings (``settings_current``).

Plugin options, plugin status rows and custom navigation tabs all live here,
told apart by ``variable``/``subkey``/``category``.
"""
from django.db import models


class SettingsCurrent(models.Model):
    """One configurable value, scoped to an access URL."""

    variable = models.CharField(max_length=255, db_index=True)
    subkey = models.CharField(max_length=255, null=True, blank=True, db_index=True)
    type = models.CharField(max_length=255, null=True, blank=True)
    category = models.CharField(max_length=255, null=True, blank=True, db_index=True)
    selected_value = models.TextField(null=True, blank=True)
    title = models.CharField(max_length=255, default="", blank=True)
    comment = models.CharField(max_length=255, null=True, blank=True)
    scope = models.CharField(max_length=50, null=True, blank=True)
    subkeytext = models.CharField(max_length=255, null=True, blank=True)
    access_url = models.IntegerField(default=1, db_index=True)
    access_url_changeable = models.BooleanField(default=False)
    access_url_locked = models.BooleanField(default=False)

    class Meta:
        db_table = "settings_current"
        ordering = ["id"]
        indexes = [
            models.Index(fields=["variable", "subkey"]),
            models.Index(fields=["subkey", "category", "type", "access_url"]),
        ]

    def __str__(self):
        if self.subkey:
            return f"{self.variable}[{self.subkey}] = {self.selected_value}"
        return f"{self.variable} = {self.selected_value}"
