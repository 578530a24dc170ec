"""
Plugin string tables.

Each plugin may ship ``<PLUGIN_ROOT>/<name>/lang/<isocode>.json``, a flat JSON
object of ``{key: text}``. Tables are merged English first, then the active
interface language, or its parent language when the active one has no file.
"""
import json
import logging
from pathlib import Path
from typing import Dict, Optional

from django.conf import settings
from django.utils import translation

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "en"


def plugin_lang_dir(plugin_name: str) -> Path:
    return Path(settings.PLUGIN_ROOT) / plugin_name / "lang"


def current_language() -> str:
    return (translation.get_language() or settings.LANGUAGE_CODE).lower()


def parent_language(isocode: str) -> Optional[str]:
    """Configured parent of ``isocode``, else its base language ("fr-ca" -> "fr")."""
    parents = getattr(settings, "PLUGIN_LANGUAGE_PARENTS", {}) or {}
    if isocode in parents:
        return parents[isocode]
    if "-" in isocode:
        return isocode.split("-", 1)[0]
    return None


def read_strings(path: Path) -> Optional[Dict[str, str]]:
    """Contents of one string table, or None when the file is missing or unreadable."""
    if not path.is_file():
        return None
    try:
        with path.open(encoding="utf-8") as fh:
            strings = json.load(fh)
    except (OSError, ValueError) as exc:
        logger.warning(f"Unreadable plugin string table {path}: {exc}")
        return None
    if not isinstance(strings, dict):
        logger.warning(f"Plugin string table {path} is not a JSON object")
        return None
    return strings


def load_plugin_strings(plugin_name: str, isocode: Optional[str] = None) -> Dict[str, str]:
    lang_dir = plugin_lang_dir(plugin_name)
    isocode = isocode or current_language()

    strings = dict(read_strings(lang_dir / f"{DEFAULT_LANGUAGE}.json") or {})

    local = read_strings(lang_dir / f"{isocode}.json")
    if local is not None:
        strings.update(local)
    else:
        parent = parent_language(isocode)
        if parent:
            strings.update(read_strings(lang_dir / f"{parent}.json") or {})

    return strings
