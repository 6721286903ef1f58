"""
Tests for the generic entity service, exercised through DepartmentService.

Covers the save/find/delete cycle, update and partial update semantics,
mirroring of every write into the search index, and failure propagation.
"""
import logging

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError

from hrapp.mocks import SearchIndexError
from hrapp.models import Department
from hrapp.schemas import DepartmentDTO, LocationDTO
from hrapp.services.base import NotFoundError


def department_count(session):
    return session.scalar(select(func.count()).select_from(Department))


@pytest.fixture
def service(services):
    return services.department()


@pytest.fixture
def index(service, search_provider):
    return search_provider.indices["department"]


class TestSaveAndFind:
    """save, find_one and find_all."""

    def test_save_assigns_id_and_round_trips(self, service):
        """save then find_one returns an equal DTO."""
        saved = service.save(DepartmentDTO(department_name="IT"))
        assert saved == DepartmentDTO(id=1, department_name="IT", location_id=None)
        assert service.find_one(1) == saved

    def test_delete_then_find_one_is_empty(self, service):
        saved = service.save(DepartmentDTO(department_name="IT"))
        service.delete(saved.id)
        assert service.find_one(saved.id) is None

    def test_find_one_missing_returns_none(self, service):
        assert service.find_one(404) is None

    def test_find_all_in_id_order(self, service):
        names = ["Sales", "IT", "Finance"]
        for name in names:
            service.save(DepartmentDTO(department_name=name))
        result = service.find_all()
        assert [dto.department_name for dto in result] == names
        assert [dto.id for dto in result] == [1, 2, 3]

    def test_find_all_empty(self, service):
        assert service.find_all() == []

    def test_save_keeps_relation_id(self, services, service):
        location = services.location().save(LocationDTO(city="Paris"))
        saved = service.save(DepartmentDTO(department_name="IT", location_id=location.id))
        assert service.find_one(saved.id).location_id == location.id

    def test_save_mirrors_to_index(self, service, index):
        saved = service.save(DepartmentDTO(department_name="Research"))
        assert ("index", saved.id) in index.calls
        assert index.document(saved.id)["department_name"] == "Research"


class TestUpdate:
    """update with and without the existence guard."""

    def test_update_overwrites_all_fields(self, services, service):
        location = services.location().save(LocationDTO(city="Paris"))
        saved = service.save(DepartmentDTO(department_name="IT", location_id=location.id))

        updated = service.update(DepartmentDTO(id=saved.id, department_name="Engineering"))

        assert updated == DepartmentDTO(id=saved.id, department_name="Engineering", location_id=None)
        assert service.find_one(saved.id) == updated

    def test_update_reindexes(self, service, index):
        saved = service.save(DepartmentDTO(department_name="IT"))
        service.update(DepartmentDTO(id=saved.id, department_name="Engineering"))
        assert index.calls.count(("index", saved.id)) == 2
        assert [dto.id for dto in service.search("engineering")] == [saved.id]
        assert service.search("it") == []

    def test_update_unknown_id_inserts_by_default(self, service, session):
        updated = service.update(DepartmentDTO(id=42, department_name="Legal"))
        assert updated.id == 42
        assert service.find_one(42) == updated
        assert department_count(session) == 1

    def test_update_unknown_id_raises_when_guarded(self, strict_services, session, search_provider):
        service = strict_services.department()
        with pytest.raises(NotFoundError) as excinfo:
            service.update(DepartmentDTO(id=42, department_name="Legal"))
        assert excinfo.value.error_code == "NOT_FOUND"
        assert department_count(session) == 0
        assert search_provider.indices["department"].calls == []

    def test_update_existing_id_when_guarded(self, strict_services):
        service = strict_services.department()
        saved = service.save(DepartmentDTO(department_name="IT"))
        assert service.update(DepartmentDTO(id=saved.id, department_name="Ops")).department_name == "Ops"


class TestPartialUpdate:
    """partial_update merges only the fields that were set."""

    def test_unset_fields_are_kept(self, services, service):
        location = services.location().save(LocationDTO(city="Paris"))
        saved = service.save(DepartmentDTO(department_name="IT", location_id=location.id))

        result = service.partial_update(DepartmentDTO(id=saved.id, department_name="Platform"))

        assert result == DepartmentDTO(id=saved.id, department_name="Platform", location_id=location.id)
        assert service.find_one(saved.id) == result

    def test_explicit_none_clears_field(self, services, service):
        location = services.location().save(LocationDTO(city="Paris"))
        saved = service.save(DepartmentDTO(department_name="IT", location_id=location.id))

        result = service.partial_update(DepartmentDTO(id=saved.id, location_id=None))

        assert result.location_id is None
        assert result.department_name == "IT"

    def test_missing_id_returns_none_without_writing(self, service, index, session):
        assert service.partial_update(DepartmentDTO(id=7, department_name="Ghost")) is None
        assert department_count(session) == 0
        assert index.calls == []

    def test_partial_update_reindexes(self, service, index):
        saved = service.save(DepartmentDTO(department_name="IT"))
        service.partial_update(DepartmentDTO(id=saved.id, department_name="Data Science"))
        assert index.document(saved.id)["department_name"] == "Data Science"


class TestDelete:
    """delete removes both copies and tolerates unknown ids."""

    def test_delete_removes_from_index(self, service, index):
        saved = service.save(DepartmentDTO(department_name="IT"))
        service.delete(saved.id)
        assert ("delete", saved.id) in index.calls
        assert index.document(saved.id) is None
        assert service.search("it") == []

    def test_delete_unknown_id_does_not_raise(self, service, index):
        service.delete(999)
        assert ("delete", 999) in index.calls

    def test_delete_nullifies_referencing_rows(self, services):
        location = services.location().save(LocationDTO(city="Paris"))
        department = services.department().save(DepartmentDTO(department_name="IT", location_id=location.id))

        services.location().delete(location.id)

        assert services.department().find_one(department.id).location_id is None


class TestFailures:
    """Store and index failures reach the caller unchanged."""

    def test_store_failure_propagates_and_skips_index(self, service, index):
        with pytest.raises(IntegrityError):
            service.save(DepartmentDTO())
        assert index.calls == []
        # The session is usable again after the rollback
        assert service.save(DepartmentDTO(department_name="IT")).id is not None

    def test_index_failure_keeps_durable_write(self, service, index):
        index.fail_next()
        with pytest.raises(SearchIndexError):
            service.save(DepartmentDTO(department_name="IT"))
        assert [dto.department_name for dto in service.find_all()] == ["IT"]

    def test_index_failure_on_delete_keeps_durable_delete(self, service, index):
        saved = service.save(DepartmentDTO(department_name="IT"))
        index.fail_next(RuntimeError("index down"))
        with pytest.raises(RuntimeError, match="index down"):
            service.delete(saved.id)
        assert service.find_one(saved.id) is None

    def test_search_failure_propagates(self, service, index):
        index.fail_next()
        with pytest.raises(SearchIndexError):
            service.search("it")


class TestLogging:
    """Services log through the logger they were given."""

    def test_injected_logger_receives_requests(self, service, caplog):
        with caplog.at_level(logging.DEBUG, logger="services.DepartmentService"):
            service.save(DepartmentDTO(department_name="IT"))
            service.find_one(1)
        messages = [record.getMessage() for record in caplog.records]
        assert any(message.startswith("Request to save Department") for message in messages)
        assert "Request to get Department : 1" in messages
