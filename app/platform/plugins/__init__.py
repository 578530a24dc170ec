"""
Plugin subsystem: the ``Plugin`` base class every installable extension
extends, the registry of configured plugins and the admin API.

Import the base class from ``app.platform.plugins.base``; models are not
defined here, plugins persist into ``settings_current`` and the course tables.
"""
