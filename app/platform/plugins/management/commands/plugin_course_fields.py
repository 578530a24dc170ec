"""
Install or remove a plugin's course settings in every course.
Run: python manage.py plugin_course_fields <plugin> [--uninstall] [--no-tool-link]
"""

from django.core.management.base import BaseCommand, CommandError

from app.platform.plugins.exceptions import PluginNotFound
from app.platform.plugins.registry import get_plugin


class Command(BaseCommand):
    help = "Install (or remove) a plugin's course settings and tool link in all courses"

    def add_arguments(self, parser):
        parser.add_argument('plugin', help='Plugin name, e.g. bbb')
        parser.add_argument(
            '--uninstall',
            action='store_true',
            help='Remove the course settings and tool link instead of adding them',
        )
        parser.add_argument(
            '--no-tool-link',
            action='store_true',
            help='Do not add a tool link on the course home pages',
        )

    def handle(self, *args, **options):
        try:
            plugin = get_plugin(options['plugin'])
        except PluginNotFound as exc:
            raise CommandError(str(exc))

        if options['uninstall']:
            count = plugin.uninstall_course_fields_in_all_courses()
            self.stdout.write(self.style.SUCCESS(f"Removed '{plugin.name}' course fields from {count} course(s)"))
        else:
            count = plugin.install_course_fields_in_all_courses(add_tool_link=not options['no_tool_link'])
            self.stdout.write(self.style.SUCCESS(f"Installed '{plugin.name}' course fields in {count} course(s)"))
