# standings/urls.py
from core.routers import OptionalSlashRouter

from .views import StandingViewSet

router = OptionalSlashRouter()
router.register(r"standings", StandingViewSet, basename="standing")

urlpatterns = router.urls
