# ea/views.py
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from core.exceptions import ValidationError
from .client import get_ea_client


class ClubDetailsView(APIView):
    """
    GET /api/ea/clubdetails?platform=<p>&clubId=<id>
    -> proxy vers EA (CORS), réponse transmise telle quelle
    """
    authentication_classes = []
    permission_classes = [AllowAny]

    def get(self, request):
        platform = request.query_params.get("platform")
        club_id = request.query_params.get("clubId")
        if not platform or not club_id:
            raise ValidationError("Missing platform or clubId")

        return Response(get_ea_client().club_details(platform, club_id))
