# core/authentication.py
from rest_framework import authentication

from .exceptions import Forbidden
from .tokens import get_token_service


class BearerTokenAuthentication(authentication.BaseAuthentication):
    """
    `Authorization: Bearer <token>`
      - pas d'en-tête, autre schéma ou pas de jeton → None (la permission renvoie 401)
      - jeton refusé               → Forbidden (403)
    """
    keyword = "Bearer"

    def authenticate(self, request):
        parts = authentication.get_authorization_header(request).split()
        if len(parts) < 2 or parts[0].lower() != self.keyword.lower().encode():
            return None

        try:
            raw = parts[1].decode()
        except UnicodeError:
            raise Forbidden("Token is not valid UTF-8.")

        return get_token_service().verify(raw), raw

    def authenticate_header(self, request):
        return f'{self.keyword} realm="api"'
