import uuid

from django.db import models


class StandingRow(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    club = models.CharField(max_length=120)  # nom du club
    points = models.IntegerField(default=0)
    played = models.IntegerField(default=0)
    won = models.IntegerField(default=0)
    drawn = models.IntegerField(default=0)
    lost = models.IntegerField(default=0)
    goals_for = models.IntegerField(default=0)
    goals_against = models.IntegerField(default=0)
    goal_difference = models.IntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        # égalité de points : ordre de création
        ordering = ['-points', 'created_at']
        verbose_name = "standing row"

    def __str__(self):
        return f"{self.club} — {self.points} pts"
