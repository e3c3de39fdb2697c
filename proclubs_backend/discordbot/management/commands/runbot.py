# discordbot/management/commands/runbot.py
from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from discordbot.bot import ProClubsBot


class Command(BaseCommand):
    help = "Démarre le bot Discord (commande !ping, livraison des rapports, webhook BOT_PORT)."

    def handle(self, *args, **options):
        config = settings.PROCLUBS
        if not config.discord_token:
            raise CommandError("DISCORD_TOKEN is required to run the bot")

        # log_handler=None : la config LOGGING de Django gère le logger "discord"
        ProClubsBot(config).run(config.discord_token, log_handler=None)
