# core/exceptions.py
"""
Taxonomie des erreurs de l'API.

Toutes les erreurs sont des APIException DRF, rendues en `{"error": ...}`
par `api_exception_handler`.
"""
import logging

from rest_framework import exceptions, status

logger = logging.getLogger(__name__)


class ValidationError(exceptions.APIException):
    """Champ ou paramètre obligatoire manquant."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Invalid request."
    default_code = "invalid"


class Unauthenticated(exceptions.NotAuthenticated):
    """Aucun jeton fourni."""
    default_detail = "Missing authentication token."


class Forbidden(exceptions.PermissionDenied):
    """Jeton illisible, mal signé ou expiré."""
    default_detail = "Invalid or expired token."


class NotFound(exceptions.NotFound):
    default_detail = "Not found."


class UpstreamError(exceptions.APIException):
    """Le fournisseur externe a échoué ; `details` garde le message d'origine."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Upstream error."
    default_code = "upstream_error"

    def __init__(self, detail=None, details=None):
        super().__init__(detail)
        self.details = details


class StorageError(exceptions.APIException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Storage error."
    default_code = "storage_error"


def api_exception_handler(exc, context):
    """
    Enveloppe le handler DRF :
      - détail texte      → {"error": "..."}
      - erreurs de champs → {"error": "Invalid payload", "fields": {...}}
      - UpstreamError     → + "details"
    """
    # import tardif : rest_framework.views charge les classes d'authentification,
    # qui importent ce module
    from rest_framework.views import exception_handler

    response = exception_handler(exc, context)
    if response is None:
        return None

    detail = getattr(exc, "detail", None)
    if isinstance(detail, (dict, list)):
        response.data = {"error": "Invalid payload", "fields": response.data}
    else:
        response.data = {"error": str(detail) if detail is not None else response.status_text}

    if isinstance(exc, UpstreamError) and exc.details:
        response.data["details"] = exc.details

    if response.status_code >= 500:
        view = context.get("view")
        logger.error("%s failed: %s", type(view).__name__ if view else "request", response.data)

    return response
