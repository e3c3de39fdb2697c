# discordbot/sink.py
"""
Acheminement des rapports de match vers un salon de discussion.

    API / webhook ──enqueue──▶ MatchReport (PENDING) ──ReportDispatcher──▶ ChatClient.send_message

Pas de nouvelle tentative : un envoi raté passe en FAILED avec le message d'erreur.
"""
import logging
from typing import List, Protocol

from asgiref.sync import sync_to_async
from django.utils import timezone

from core.store import storage_errors
from .models import MatchReport

logger = logging.getLogger(__name__)


class ChatClient(Protocol):
    async def send_message(self, channel_id: int, text: str) -> None:
        ...


class MatchReportQueue:
    def enqueue(self, match_id: str) -> MatchReport:
        with storage_errors("queue match report"):
            report = MatchReport.objects.create(match_id=match_id)
        logger.info("Match %s queued for Discord (report %s)", match_id, report.pk)
        return report

    def pending(self, limit: int = 20) -> List[MatchReport]:
        with storage_errors("read pending match reports"):
            return list(MatchReport.objects.filter(status="PENDING").order_by("created_at")[:limit])

    def mark_delivered(self, report: MatchReport) -> None:
        report.status = "DELIVERED"
        report.delivered_at = timezone.now()
        report.error = ""
        with storage_errors("update match report"):
            report.save(update_fields=["status", "delivered_at", "error"])

    def mark_failed(self, report: MatchReport, error: str) -> None:
        report.status = "FAILED"
        report.error = error[:2000]
        with storage_errors("update match report"):
            report.save(update_fields=["status", "error"])


def format_report(report: MatchReport) -> str:
    return f"Match {report.match_id} has been reported!"


def acknowledgement(report: MatchReport) -> dict:
    """Réponse commune de l'API et du webhook du bot."""
    return {
        "message": f"Match {report.match_id} reported to Discord.",
        "report": str(report.pk),
        "status": report.status.lower(),
    }


class ReportDispatcher:
    def __init__(self, queue: MatchReportQueue, client: ChatClient, channel_id: int, batch_size: int = 20):
        self.queue = queue
        self.client = client
        self.channel_id = channel_id
        self.batch_size = batch_size

    async def dispatch_pending(self) -> int:
        """Publie les rapports en attente ; renvoie le nombre de rapports livrés."""
        reports = await sync_to_async(self.queue.pending)(self.batch_size)
        delivered = 0
        for report in reports:
            try:
                await self.client.send_message(self.channel_id, format_report(report))
            except Exception as e:
                logger.error("Failed to deliver match report %s: %s", report.pk, e, exc_info=True)
                await sync_to_async(self.queue.mark_failed)(report, str(e) or type(e).__name__)
                continue
            await sync_to_async(self.queue.mark_delivered)(report)
            delivered += 1
        return delivered
