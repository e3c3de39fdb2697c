from unittest import mock

import pytest
from django.db import DatabaseError

from clubs.models import Club
from clubs.serializers import ClubSerializer
from core.exceptions import NotFound, StorageError
from core.store import ResourceStore

pytestmark = pytest.mark.django_db


@pytest.fixture
def store():
    return ResourceStore(Club, ClubSerializer, label="Club")


def test_create_then_list_includes_record(store):
    created = store.create({"name": "Red FC", "logo": "https://img.test/r.png"})
    assert created["id"]
    assert created in store.list()


def test_update_partial(store):
    created = store.create({"name": "Red FC", "description": "first"})
    updated = store.update(created["id"], {"logo": "https://img.test/r.png"})
    assert updated["description"] == "first"
    assert updated["logo"] == "https://img.test/r.png"


def test_get_missing_raises_not_found(store):
    with pytest.raises(NotFound):
        store.get("2f1d0b7e-1d3c-4a55-9d1e-3a1c9a0f0000")


def test_delete_reports_whether_record_existed(store):
    created = store.create({"name": "Red FC"})
    assert store.delete(created["id"]) is True
    assert store.delete(created["id"]) is False


def test_database_failure_becomes_storage_error(store):
    with mock.patch.object(Club.objects, "order_by", side_effect=DatabaseError("db down")):
        with pytest.raises(StorageError):
            store.list()
