# core/viewsets.py
from rest_framework import permissions, status, viewsets
from rest_framework.response import Response

from .store import ResourceStore


class ResourceViewSet(viewsets.ViewSet):
    """
    Endpoints CRUD d'une ressource :
      - GET    /api/<ressource>        → liste (public)
      - GET    /api/<ressource>/{id}   → détail (public)
      - POST   /api/<ressource>        → créer (jeton)
      - PUT/PATCH /api/<ressource>/{id} → mise à jour partielle (jeton)
      - DELETE /api/<ressource>/{id}   → suppression idempotente, 204 (jeton)
    """
    store: ResourceStore = None
    lookup_value_regex = "[^/]+"

    def perform_authentication(self, request):
        # lecture publique : l'en-tête Authorization est ignoré
        if request.method in permissions.SAFE_METHODS:
            return
        super().perform_authentication(request)

    def list(self, request):
        return Response(self.store.list())

    def retrieve(self, request, pk=None):
        return Response(self.store.get(pk))

    def create(self, request):
        return Response(self.store.create(request.data), status=status.HTTP_201_CREATED)

    def update(self, request, pk=None):
        return Response(self.store.update(pk, request.data))

    def partial_update(self, request, pk=None):
        return self.update(request, pk=pk)

    def destroy(self, request, pk=None):
        self.store.delete(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)
