# players/serializers.py
from rest_framework import serializers

from core.fields import StatsField
from .models import Player


class PlayerSerializer(serializers.ModelSerializer):
    stats = StatsField()

    class Meta:
        model = Player
        fields = ["id", "name", "club", "stats"]
