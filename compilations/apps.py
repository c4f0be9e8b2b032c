from django.apps import AppConfig


class CompilationsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "compilations"

    def ready(self) -> None:
        from compilations import signals  # noqa: F401
