# standings/serializers.py
from rest_framework import serializers

from .models import StandingRow


class StandingRowSerializer(serializers.ModelSerializer):
    # noms courts côté JSON
    gf = serializers.IntegerField(source="goals_for", required=False)
    ga = serializers.IntegerField(source="goals_against", required=False)
    gd = serializers.IntegerField(source="goal_difference", required=False)

    class Meta:
        model = StandingRow
        fields = ["id", "club", "points", "played", "won", "drawn", "lost", "gf", "ga", "gd"]

    def validate(self, attrs):
        # gd absent à la création → gf - ga
        if self.instance is None and "goal_difference" not in attrs:
            attrs["goal_difference"] = attrs.get("goals_for", 0) - attrs.get("goals_against", 0)
        return attrs
