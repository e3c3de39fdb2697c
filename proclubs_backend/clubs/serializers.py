# clubs/serializers.py
from rest_framework import serializers

from core.fields import StatsField
from .models import Club


class ClubSerializer(serializers.ModelSerializer):
    stats = StatsField()

    class Meta:
        model = Club
        fields = ["id", "name", "logo", "description", "stats"]
