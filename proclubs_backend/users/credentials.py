# users/credentials.py
import logging
from typing import Optional

from django.contrib.auth.hashers import check_password, make_password

from core.store import storage_errors
from .models import UserAccount

logger = logging.getLogger(__name__)


class CredentialStore:
    """Email + mot de passe haché (hasher Django : PBKDF2 salé par défaut)."""

    def register(self, email: str, password: str) -> UserAccount:
        # pas de contrôle d'unicité sur l'email
        with storage_errors("register user"):
            account = UserAccount.objects.create(email=email, password_hash=make_password(password))
        logger.info("Registered account %s", account.pk)
        return account

    def find_by_email(self, email: str) -> Optional[UserAccount]:
        """Le plus ancien compte pour cet email, ou None."""
        with storage_errors("look up user"):
            return UserAccount.objects.filter(email=email).order_by("created_at").first()

    def verify_password(self, password: str, password_hash: str) -> bool:
        # comparaison à temps constant
        return check_password(password, password_hash)
