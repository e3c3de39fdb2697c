# standings/admin.py
from django.contrib import admin
from .models import StandingRow

@admin.register(StandingRow)
class StandingRowAdmin(admin.ModelAdmin):
    list_display = (
        "club", "points", "played", "won", "drawn", "lost",
        "goals_for", "goals_against", "goal_difference",
    )
    search_fields = ("club",)
    ordering = ("-points", "created_at")
