# users/views.py
import logging

from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from core.exceptions import ValidationError
from core.tokens import TokenIdentity, get_token_service
from .credentials import CredentialStore

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"


def _credentials(request):
    data = request.data if hasattr(request.data, "get") else {}
    return data.get("email"), data.get("password")


class RegisterView(APIView):
    """POST /api/register {email, password} → 201"""
    authentication_classes = []
    permission_classes = [AllowAny]

    def post(self, request):
        email, password = _credentials(request)
        if not email or not password:
            raise ValidationError("Missing email or password")

        CredentialStore().register(str(email), str(password))
        return Response({"message": "User registered"}, status=status.HTTP_201_CREATED)


class LoginView(APIView):
    """POST /api/login {email, password} → {token} ; 400 si identifiants invalides"""
    authentication_classes = []
    permission_classes = [AllowAny]

    def post(self, request):
        email, password = _credentials(request)
        if not email or not password:
            return Response({"error": INVALID_CREDENTIALS}, status=status.HTTP_400_BAD_REQUEST)

        store = CredentialStore()
        account = store.find_by_email(str(email))
        if account is None or not store.verify_password(str(password), account.password_hash):
            logger.info("Failed login attempt")
            return Response({"error": INVALID_CREDENTIALS}, status=status.HTTP_400_BAD_REQUEST)

        token = get_token_service().issue(TokenIdentity(email=account.email, user_id=str(account.pk)))
        return Response({"token": token})
