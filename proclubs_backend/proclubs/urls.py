# proclubs/urls.py
from django.contrib import admin
from django.urls import path, include
from django.http import JsonResponse


def root_ping(request):
    return JsonResponse({
        "name": "Pro Clubs Championship API",
        "admin": "/admin/",
        "auth": {
            "register": "/api/register",
            "login": "/api/login",
        },
        "endpoints": [
            "/api/clubs",
            "/api/players",
            "/api/standings",
            "/api/ea/clubdetails?platform=<platform>&clubId=<id>",
            "/api/discord/report-match",
        ],
    })


urlpatterns = [
    path("", root_ping, name="root"),

    path("admin/", admin.site.urls),

    # APIs
    path("api/", include("users.urls")),
    path("api/", include("clubs.urls")),
    path("api/", include("players.urls")),
    path("api/", include("standings.urls")),
    path("api/ea/", include("ea.urls")),
    path("api/discord/", include("discordbot.urls")),
]
