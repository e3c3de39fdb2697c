# core/checks.py
from django.conf import settings
from django.core.checks import Tags, Warning, register


@register(Tags.security, deploy=True)
def insecure_defaults_check(app_configs, **kwargs):
    """`manage.py check --deploy` signale les secrets de développement."""
    config = settings.PROCLUBS
    warnings = []
    if config.uses_insecure_jwt_secret:
        warnings.append(Warning(
            "JWT_SECRET uses the development default; tokens can be forged.",
            hint="Set JWT_SECRET in the environment.",
            id="proclubs.W001",
        ))
    if config.uses_insecure_secret_key:
        warnings.append(Warning(
            "SECRET_KEY uses the development default.",
            hint="Set SECRET_KEY in the environment.",
            id="proclubs.W002",
        ))
    if not config.discord_token:
        warnings.append(Warning(
            "DISCORD_TOKEN is not set; the bot process cannot start.",
            id="proclubs.W003",
        ))
    return warnings
