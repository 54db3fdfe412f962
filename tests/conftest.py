"""
Shared pytest configuration for menuclasses tests.

Configures a minimal Django settings module so the app registry, template
engine and override_settings work without a project.
"""

import django
import pytest as _pytest
from django.conf import settings


def pytest_configure(config: _pytest.Config) -> None:
    """Configure Django before test collection imports the app."""
    if not settings.configured:
        settings.configure(
            INSTALLED_APPS=["menuclasses"],
            TEMPLATES=[
                {
                    "BACKEND": "django.template.backends.django.DjangoTemplates",
                    "APP_DIRS": True,
                    "OPTIONS": {},
                }
            ],
            USE_TZ=True,
        )
    django.setup()


@_pytest.fixture(autouse=True)
def _fresh_default_merger():
    """Each test sees the default merger built from current settings."""
    from menuclasses.conf import reset_default_merger

    reset_default_merger()
    yield
    reset_default_merger()
