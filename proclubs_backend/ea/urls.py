# ea/urls.py
from django.urls import re_path

from .views import ClubDetailsView

urlpatterns = [
    re_path(r"^clubdetails/?$", ClubDetailsView.as_view(), name="ea-clubdetails"),
]
