import uuid

from django.db import models

REPORT_STATUS = [
    ("PENDING", "Pending"),
    ("DELIVERED", "Delivered"),
    ("FAILED", "Failed"),
]


class MatchReport(models.Model):
    """
    File d'attente des rapports de match, partagée entre l'API et le bot.
    L'API insère en PENDING ; le bot publie puis passe en DELIVERED ou FAILED.
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    match_id = models.CharField(max_length=120)
    status = models.CharField(max_length=10, choices=REPORT_STATUS, default="PENDING", db_index=True)
    error = models.TextField(blank=True, default="")
    created_at = models.DateTimeField(auto_now_add=True)
    delivered_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        ordering = ['created_at']

    def __str__(self):
        return f"Match {self.match_id} ({self.status})"
