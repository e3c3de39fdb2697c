import os
import subprocess
import sys

from django.conf import settings

# Interpréteur neuf : seul django.setup() a chargé quelque chose avant la requête.
FRESH_REQUEST = """
import django
django.setup()
from django.test import Client
response = Client().post("/api/clubs", {"name": "Red FC"}, content_type="application/json")
print(response.status_code, response.json()["error"])
"""


def test_fresh_process_resolves_api_settings_and_serves_a_route():
    env = {
        **os.environ,
        "DJANGO_SETTINGS_MODULE": "proclubs.test_settings",
        "PYTHONPATH": str(settings.BASE_DIR),
    }
    result = subprocess.run(
        [sys.executable, "-c", FRESH_REQUEST],
        env=env, capture_output=True, text=True, timeout=60,
    )

    assert result.returncode == 0, result.stderr
    assert result.stdout.strip() == "401 Missing authentication token."
