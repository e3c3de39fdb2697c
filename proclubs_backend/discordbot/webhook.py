# discordbot/webhook.py
"""Webhook HTTP du bot : POST /bot/report-match {matchId}."""
import logging

from aiohttp import web
from asgiref.sync import sync_to_async

from core.exceptions import StorageError
from .sink import MatchReportQueue, acknowledgement

logger = logging.getLogger(__name__)


def create_webhook_app(queue: MatchReportQueue) -> web.Application:
    async def report_match(request: web.Request) -> web.Response:
        try:
            payload = await request.json()
        except ValueError:
            payload = None
        match_id = payload.get("matchId") if isinstance(payload, dict) else None
        if not match_id:
            return web.json_response({"error": "Missing matchId"}, status=400)

        logger.info("[Discord Bot] Reporting match: %s", match_id)
        try:
            report = await sync_to_async(queue.enqueue)(str(match_id))
        except StorageError as e:
            return web.json_response({"error": str(e.detail)}, status=500)
        return web.json_response(acknowledgement(report))

    app = web.Application()
    app.router.add_post("/bot/report-match", report_match)
    return app
