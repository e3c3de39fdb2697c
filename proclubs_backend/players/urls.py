# players/urls.py
from core.routers import OptionalSlashRouter

from .views import PlayerViewSet

router = OptionalSlashRouter()
router.register(r"players", PlayerViewSet, basename="player")

urlpatterns = router.urls
