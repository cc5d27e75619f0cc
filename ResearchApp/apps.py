from django.apps import AppConfig


class ResearchAppConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "ResearchApp"
    verbose_name = "Articles and studies"

    def ready(self):
        # connect the Study/Replication signal handlers
        from . import signal  # noqa: F401
