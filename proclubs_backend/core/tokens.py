# core/tokens.py
"""
Émission et vérification des jetons d'identité (JWT HS256).

Le secret et la durée de vie sont passés à la construction ; `get_token_service()`
les lit depuis `settings.PROCLUBS`.
"""
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional
from uuid import uuid4

from django.conf import settings
from django.utils import timezone
from rest_framework_simplejwt.backends import TokenBackend
from rest_framework_simplejwt.exceptions import TokenBackendError
from rest_framework_simplejwt.utils import datetime_to_epoch

from .exceptions import Forbidden, Unauthenticated

TOKEN_TYPE = "access"


@dataclass(frozen=True)
class TokenIdentity:
    """Identité portée par un jeton ; sert aussi de `request.user` DRF."""
    email: str
    user_id: str

    is_authenticated = True
    is_anonymous = False


class TokenService:
    def __init__(self, secret: str, lifetime: timedelta = timedelta(hours=24), algorithm: str = "HS256"):
        self.lifetime = lifetime
        self._backend = TokenBackend(algorithm, signing_key=secret)

    def issue(self, identity: TokenIdentity, issued_at: Optional[datetime] = None) -> str:
        """Signe un jeton valable `lifetime` à partir de `issued_at` (maintenant par défaut)."""
        issued_at = issued_at or timezone.now()
        payload = {
            "token_type": TOKEN_TYPE,
            "email": identity.email,
            "user_id": identity.user_id,
            "iat": datetime_to_epoch(issued_at),
            "exp": datetime_to_epoch(issued_at + self.lifetime),
            "jti": uuid4().hex,
        }
        return self._backend.encode(payload)

    def verify(self, raw: Optional[str]) -> TokenIdentity:
        """
        Décode `raw`.
        - absent/vide          → Unauthenticated (401)
        - illisible/expiré/... → Forbidden (403)
        """
        if not raw:
            raise Unauthenticated()
        try:
            payload = self._backend.decode(raw, verify=True)
        except TokenBackendError as exc:
            raise Forbidden(str(exc))

        email, user_id = payload.get("email"), payload.get("user_id")
        if payload.get("token_type") != TOKEN_TYPE or not email or not user_id:
            raise Forbidden("Token is missing identity claims.")
        return TokenIdentity(email=email, user_id=str(user_id))


def get_token_service() -> TokenService:
    config = settings.PROCLUBS
    return TokenService(config.jwt_secret, timedelta(hours=config.jwt_lifetime_hours))
