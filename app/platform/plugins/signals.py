import logging

from django.db.models.signals import post_save
from django.dispatch import receiver

from app.courses.models import Course

from .registry import get_enabled_plugins

logger = logging.getLogger(__name__)


@receiver(post_save, sender=Course, dispatch_uid="plugins_install_in_new_course")
def install_course_plugins(sender, instance, created, **kwargs):
    """Give every new course the settings and tool links of the enabled course plugins."""
    if not created:
        return
    for plugin in get_enabled_plugins():
        if plugin.is_course_plugin:
            plugin.course_install(instance.pk)
            logger.info(f"Plugin '{plugin.name}' installed in new course {instance.pk}")
