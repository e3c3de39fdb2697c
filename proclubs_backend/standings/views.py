# standings/views.py
from rest_framework.response import Response

from clubs.models import Club
from core.store import ResourceStore, storage_errors
from core.viewsets import ResourceViewSet
from .models import StandingRow
from .serializers import StandingRowSerializer


def _abs_url(request, url):
    """Retourne une URL absolue pour un logo, "" si vide."""
    u = str(url or "")
    if not u or u.startswith("http") or request is None:
        return u
    return request.build_absolute_uri(u)


def _club_logos(names):
    """{nom du club: logo} ; le premier club créé l'emporte en cas de doublon."""
    logos = {}
    with storage_errors("read club logos"):
        rows = Club.objects.filter(name__in=names).order_by("created_at").values_list("name", "logo")
        for name, logo in rows:
            logos.setdefault(name, logo)
    return logos


def display_row(row, logo=""):
    """Ligne de classement au format du front."""
    return {
        "id": row["id"],
        "club": row["club"],
        "logo": logo or "",
        "p": row["played"],
        "w": row["won"],
        "d": row["drawn"],
        "l": row["lost"],
        "gf": row["gf"],
        "ga": row["ga"],
        "gd": row["gd"],
        "pts": row["points"],
    }


class StandingViewSet(ResourceViewSet):
    """
    GET /api/standings
    -> tableau trié par points (décroissant) avec logo du club
    Écritures : mêmes règles que /api/clubs.
    """
    store = ResourceStore(StandingRow, StandingRowSerializer, ordering=("-points", "created_at"), label="Standing")

    def list(self, request):
        rows = self.store.list()
        logos = _club_logos({r["club"] for r in rows})
        return Response([
            display_row(r, _abs_url(request, logos.get(r["club"])))
            for r in rows
        ])
