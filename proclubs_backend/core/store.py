# core/store.py
"""
Stockage générique des ressources (club, joueur, classement).

Chaque opération est un aller-retour direct vers la base, sans cache :
  - list()              → tous les enregistrements, dans l'ordre du store
  - get(id)             → un enregistrement ou NotFound
  - create(payload)     → enregistrement créé (avec son id)
  - update(id, payload) → seuls les champs fournis changent ; NotFound sinon
  - delete(id)          → idempotent, un id inconnu n'est pas une erreur
"""
import logging
from contextlib import contextmanager

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import DatabaseError

from .exceptions import NotFound, StorageError

logger = logging.getLogger(__name__)


@contextmanager
def storage_errors(action):
    try:
        yield
    except DatabaseError as exc:
        logger.exception("Storage failure while trying to %s", action)
        raise StorageError(f"Could not {action}.") from exc


class ResourceStore:
    def __init__(self, model, serializer_class, ordering=("created_at",), label=None):
        self.model = model
        self.serializer_class = serializer_class
        self.ordering = tuple(ordering)
        self.label = label or model._meta.verbose_name.capitalize()

    def _find(self, pk):
        try:
            return self.model.objects.filter(pk=pk).first()
        except (ValueError, TypeError, DjangoValidationError):
            # id mal formé (pas un UUID) → inexistant
            return None

    def _get_or_404(self, pk):
        instance = self._find(pk)
        if instance is None:
            raise NotFound(f"{self.label} not found.")
        return instance

    def list(self):
        with storage_errors(f"list {self.label.lower()}s"):
            rows = list(self.model.objects.order_by(*self.ordering))
        return self.serializer_class(rows, many=True).data

    def get(self, pk):
        with storage_errors(f"read {self.label.lower()}"):
            instance = self._get_or_404(pk)
        return self.serializer_class(instance).data

    def create(self, payload):
        serializer = self.serializer_class(data=payload)
        serializer.is_valid(raise_exception=True)
        with storage_errors(f"create {self.label.lower()}"):
            instance = serializer.save()
        logger.info("%s %s created", self.label, instance.pk)
        return serializer.data

    def update(self, pk, payload):
        with storage_errors(f"update {self.label.lower()}"):
            instance = self._get_or_404(pk)
        serializer = self.serializer_class(instance, data=payload, partial=True)
        serializer.is_valid(raise_exception=True)
        with storage_errors(f"update {self.label.lower()}"):
            serializer.save()
        logger.info("%s %s updated (%s)", self.label, pk, ", ".join(sorted(serializer.validated_data)) or "no fields")
        return serializer.data

    def delete(self, pk):
        """Supprime `pk` ; renvoie True si un enregistrement existait."""
        with storage_errors(f"delete {self.label.lower()}"):
            instance = self._find(pk)
            if instance is None:
                return False
            instance.delete()
        logger.info("%s %s deleted", self.label, pk)
        return True
