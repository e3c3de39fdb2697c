# players/admin.py
from django.contrib import admin
from .models import Player

@admin.register(Player)
class PlayerAdmin(admin.ModelAdmin):
    list_display = ("name", "club", "created_at")
    search_fields = ("name", "club")
    list_filter = ("club",)
