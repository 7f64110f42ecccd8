from django.apps import AppConfig


class CatalogConfig(AppConfig):
    default_auto_field = "django.db.models.AutoField"
    name = "catalog"

    def ready(self) -> None:
        from catalog import signals  # noqa: F401
