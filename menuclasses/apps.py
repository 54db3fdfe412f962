from django.apps import AppConfig


class MenuClassesConfig(AppConfig):
    name = 'menuclasses'
    verbose_name = 'Menu classes'

    def ready(self):
        """Import signal handlers when app is ready."""
        import menuclasses.signals  # noqa: F401 - Register settings signal handlers
