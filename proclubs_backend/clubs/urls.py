# clubs/urls.py
from core.routers import OptionalSlashRouter

from .views import ClubViewSet

router = OptionalSlashRouter()
router.register(r"clubs", ClubViewSet, basename="club")

urlpatterns = router.urls
