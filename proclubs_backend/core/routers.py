# core/routers.py
from rest_framework.routers import SimpleRouter


class OptionalSlashRouter(SimpleRouter):
    """`/api/clubs` et `/api/clubs/` pointent vers la même vue."""

    def __init__(self):
        super().__init__()
        self.trailing_slash = "/?"
