# discordbot/admin.py
from django.contrib import admin
from .models import MatchReport

@admin.register(MatchReport)
class MatchReportAdmin(admin.ModelAdmin):
    list_display = ("match_id", "status", "created_at", "delivered_at")
    list_filter = ("status",)
    search_fields = ("match_id",)
    readonly_fields = ("created_at", "delivered_at", "error")
