# ea/client.py
"""Client HTTP du fournisseur EA Pro Clubs (réponse JSON renvoyée telle quelle)."""
import logging
from typing import Any, Mapping, Optional

import httpx
from django.conf import settings

from core.exceptions import UpstreamError

logger = logging.getLogger(__name__)


class EAClubClient:
    def __init__(self, base_url: str, timeout: float = 10.0, headers: Optional[Mapping[str, str]] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.headers = dict(headers or {})

    def club_details(self, platform: str, club_id: str) -> Any:
        url = f"{self.base_url}/clubdetails"
        try:
            response = httpx.get(
                url,
                params={"platform": platform, "clubId": club_id},
                headers=self.headers,
                timeout=self.timeout,
                follow_redirects=True,
            )
            response.raise_for_status()
            return response.json()
        except httpx.HTTPError as exc:
            logger.warning("EA clubdetails failed for %s/%s: %s", platform, club_id, exc)
            raise UpstreamError("EA API error", details=str(exc)) from exc
        except ValueError as exc:
            logger.warning("EA clubdetails returned non-JSON for %s/%s", platform, club_id)
            raise UpstreamError("EA API error", details=f"Invalid JSON from EA: {exc}") from exc


def get_ea_client() -> EAClubClient:
    config = settings.PROCLUBS
    return EAClubClient(config.ea_api_url, timeout=config.ea_timeout, headers=config.ea_headers)
