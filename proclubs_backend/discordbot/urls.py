# discordbot/urls.py
from django.urls import re_path

from .views import ReportMatchView

urlpatterns = [
    re_path(r"^report-match/?$", ReportMatchView.as_view(), name="discord-report-match"),
]
