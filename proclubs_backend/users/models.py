import uuid

from django.db import models


class UserAccount(models.Model):
    """
    Compte API (distinct des comptes staff de l'admin Django).
    L'email n'est pas unique : deux inscriptions créent deux comptes.
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    email = models.CharField(max_length=254, db_index=True)
    password_hash = models.CharField(max_length=256)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['created_at']
        verbose_name = "user account"

    def __str__(self):
        return self.email
