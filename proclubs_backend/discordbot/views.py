# discordbot/views.py
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from core.exceptions import ValidationError
from .sink import MatchReportQueue, acknowledgement


class ReportMatchView(APIView):
    """
    POST /api/discord/report-match {matchId}
    -> met le rapport en file ; le bot le publie sur Discord
    """
    authentication_classes = []
    permission_classes = [AllowAny]

    def post(self, request):
        data = request.data if hasattr(request.data, "get") else {}
        match_id = data.get("matchId")
        if not match_id:
            raise ValidationError("Missing matchId")

        report = MatchReportQueue().enqueue(str(match_id))
        return Response(acknowledgement(report))
