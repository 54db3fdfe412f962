# menuclasses/conf.py
"""
Process-wide defaults read from Django settings.

    MENU_CLASSES_UNESCAPE_PATTERNS = "___"        # regex or list of regexes
    MENU_CLASSES_UNESCAPE_REPLACEMENTS = ":"      # string or list of strings
"""

import logging
from functools import lru_cache

from django.conf import settings

from .merger import AttributeMerger
from .unescape import DEFAULT_PATTERNS, DEFAULT_REPLACEMENTS, UnescapeRules

logger = logging.getLogger(__name__)

SETTING_NAMES = (
    "MENU_CLASSES_UNESCAPE_PATTERNS",
    "MENU_CLASSES_UNESCAPE_REPLACEMENTS",
)


def get_unescape_rules() -> UnescapeRules:
    patterns = getattr(settings, "MENU_CLASSES_UNESCAPE_PATTERNS", DEFAULT_PATTERNS)
    replacements = getattr(
        settings, "MENU_CLASSES_UNESCAPE_REPLACEMENTS", DEFAULT_REPLACEMENTS
    )
    return UnescapeRules(patterns, replacements)


@lru_cache(maxsize=1)
def get_default_merger() -> AttributeMerger:
    """Build the shared merger once; settings are read on first use only."""
    rules = get_unescape_rules()
    logger.debug("Menu class un-escape rules: %r", rules)
    return AttributeMerger(rules)


def reset_default_merger() -> None:
    get_default_merger.cache_clear()
