# discordbot/bot.py
"""
Bot Discord du championnat :
  - commande !ping → Pong!
  - boucle de livraison des rapports de match (toutes les REPORT_POLL_SECONDS)
  - webhook HTTP sur BOT_PORT
"""
import logging
from typing import Optional

import discord
from aiohttp import web
from asgiref.sync import sync_to_async
from discord.ext import commands, tasks
from django.db import close_old_connections

from core.exceptions import StorageError
from proclubs.config import ServiceConfig
from .sink import MatchReportQueue, ReportDispatcher
from .webhook import create_webhook_app

logger = logging.getLogger(__name__)


class DiscordChannelClient:
    """ChatClient adossé au bot : envoie dans un salon par son id."""

    def __init__(self, bot: commands.Bot):
        self.bot = bot

    async def send_message(self, channel_id: int, text: str) -> None:
        channel = self.bot.get_channel(channel_id) or await self.bot.fetch_channel(channel_id)
        await channel.send(text)


class ReportsCog(commands.Cog):
    """Commandes et tâche de fond des rapports de match"""

    def __init__(self, bot: "ProClubsBot"):
        self.bot = bot
        channel_id = bot.config.discord_report_channel_id
        self.dispatcher: Optional[ReportDispatcher] = None
        if channel_id:
            self.dispatcher = ReportDispatcher(bot.queue, DiscordChannelClient(bot), channel_id)
        self.deliver_reports.change_interval(seconds=bot.config.report_poll_seconds)

    async def cog_load(self):
        if self.dispatcher:
            self.deliver_reports.start()
            logger.info("ReportsCog: delivery loop started")
        else:
            logger.warning("DISCORD_REPORT_CHANNEL_ID is not set; match reports stay queued")

    def cog_unload(self):
        self.deliver_reports.cancel()

    @commands.command(name="ping")
    async def ping(self, ctx: commands.Context):
        await ctx.reply("Pong!")

    @tasks.loop(seconds=10)
    async def deliver_reports(self):
        # processus long hors cycle requête : on écarte une connexion morte avant chaque passe
        await sync_to_async(close_old_connections)()
        try:
            count = await self.dispatcher.dispatch_pending()
        except StorageError as e:
            logger.error("Could not read the match report queue: %s", e)
            return
        if count:
            logger.info("Delivered %s match report(s)", count)

    @deliver_reports.before_loop
    async def before_deliver_reports(self):
        await self.bot.wait_until_ready()


class ProClubsBot(commands.Bot):
    def __init__(self, config: ServiceConfig, queue: Optional[MatchReportQueue] = None):
        intents = discord.Intents.default()
        intents.message_content = True
        intents.guilds = True

        super().__init__(
            command_prefix=config.command_prefix,
            intents=intents,
            help_command=None,
        )
        self.config = config
        self.queue = queue or MatchReportQueue()
        self._webhook_runner: Optional[web.AppRunner] = None

    async def setup_hook(self):
        await self.add_cog(ReportsCog(self))
        await self.start_webhook()

    async def start_webhook(self):
        runner = web.AppRunner(create_webhook_app(self.queue))
        await runner.setup()
        site = web.TCPSite(runner, "0.0.0.0", self.config.bot_port)
        await site.start()
        self._webhook_runner = runner
        logger.info("Discord bot webhook listening on port %s", self.config.bot_port)

    async def on_ready(self):
        logger.info("Discord bot logged in as %s", self.user)

    async def on_command_error(self, ctx: commands.Context, error: Exception):
        if isinstance(error, commands.CommandNotFound):
            return
        logger.error("Unexpected error in command %s: %s", ctx.command, error, exc_info=error)

    async def close(self):
        logger.info("Shutting down Discord bot...")
        if self._webhook_runner:
            await self._webhook_runner.cleanup()
        await super().close()
