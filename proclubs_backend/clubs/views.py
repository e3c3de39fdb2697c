# clubs/views.py
from core.store import ResourceStore
from core.viewsets import ResourceViewSet
from .models import Club
from .serializers import ClubSerializer


class ClubViewSet(ResourceViewSet):
    """
    API REST pour gérer les clubs.
    - GET /api/clubs → liste
    - POST /api/clubs → créer
    - GET /api/clubs/{id} → détail
    - PUT/PATCH /api/clubs/{id} → mise à jour
    - DELETE /api/clubs/{id} → suppression
    """
    store = ResourceStore(Club, ClubSerializer, label="Club")
