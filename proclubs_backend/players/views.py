# players/views.py
from core.store import ResourceStore
from core.viewsets import ResourceViewSet
from .models import Player
from .serializers import PlayerSerializer


class PlayerViewSet(ResourceViewSet):
    """
    /api/players
      - `club` est le nom du club (aucun contrôle d'existence)
    """
    store = ResourceStore(Player, PlayerSerializer, label="Player")
