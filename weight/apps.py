from django.apps import AppConfig


class WeightConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "weight"
    verbose_name = "Weight"
