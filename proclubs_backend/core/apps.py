from django.apps import AppConfig


class CoreConfig(AppConfig):
    name = "core"
    verbose_name = "Noyau API"

    def ready(self):
        # enregistre les checks de déploiement
        from . import checks  # noqa: F401
