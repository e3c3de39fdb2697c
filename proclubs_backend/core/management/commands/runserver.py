# core/management/commands/runserver.py
from django.conf import settings
from django.contrib.staticfiles.management.commands.runserver import Command as RunserverCommand


class Command(RunserverCommand):
    """`runserver` écoute sur PORT (4000 par défaut) au lieu de 8000."""
    default_port = str(settings.PROCLUBS.port)
