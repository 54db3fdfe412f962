# menuclasses/signals.py
"""Signal handlers for the menuclasses app."""

from django.dispatch import receiver
from django.test.signals import setting_changed

from .conf import SETTING_NAMES, reset_default_merger


@receiver(setting_changed)
def reset_merger_on_setting_change(sender, setting, **kwargs):
    """Rebuild the default merger when override_settings touches its config."""
    if setting in SETTING_NAMES:
        reset_default_merger()
