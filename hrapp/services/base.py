"""
Base Service Classes

This module provides the foundation for the entity services: the service
error hierarchy, the base service carrying an injected logger, and the
generic CRUD + search service every entity service is built from.
"""

import logging
from typing import Any, Dict, Generic, List, Optional, TypeVar, Union
from datetime import datetime
from abc import ABC

from hrapp.core.database import UnitOfWork
from hrapp.core.pagination import Page, PageRequest
from hrapp.repositories.interfaces import EntityRepository, Mapper, SearchRepository

E = TypeVar('E')
D = TypeVar('D')


class ServiceError(Exception):
    """Base exception for service layer errors."""

    def __init__(self, message: str, error_code: str = None, details: Dict[str, Any] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or "SERVICE_ERROR"
        self.details = details or {}
        self.timestamp = datetime.utcnow()


class BadRequestError(ServiceError):
    """Request that cannot be applied as given."""

    def __init__(self, message: str, field: str = None, value: Any = None):
        super().__init__(message, "BAD_REQUEST", {"field": field, "value": value})
        self.field = field
        self.value = value


class NotFoundError(ServiceError):
    """Resource not found error."""

    def __init__(self, resource_type: str, identifier: Any):
        message = f"{resource_type} not found: {identifier}"
        super().__init__(message, "NOT_FOUND", {"resource_type": resource_type, "identifier": identifier})


class BaseService(ABC):
    """Abstract base class for all services."""

    def __init__(self, name: str = None, logger: logging.Logger = None):
        self.name = name or self.__class__.__name__
        self.logger = logger or logging.getLogger(f"services.{self.name}")


class EntityService(BaseService, Generic[E, D]):
    """
    CRUD and search operations for one entity type.

    Every write is committed to the durable store before it is mirrored
    to the search index, so an index failure leaves the durable write in
    place and reaches the caller as-is. Lookups that find nothing return
    ``None`` rather than raising.
    """

    entity_name: str = None
    entity_plural: str = None

    def __init__(
        self,
        repository: EntityRepository[E],
        mapper: Mapper[E, D],
        search_repository: SearchRepository[E],
        unit_of_work: UnitOfWork,
        logger: logging.Logger = None,
        update_requires_existing: bool = False,
    ):
        super().__init__(logger=logger)
        self.repository = repository
        self.mapper = mapper
        self.search_repository = search_repository
        self.unit_of_work = unit_of_work
        self.update_requires_existing = update_requires_existing

    def save(self, dto: D) -> D:
        """Persist a DTO and mirror it to the search index."""
        self.logger.debug("Request to save %s : %s", self.entity_name, dto)
        with self.unit_of_work.begin():
            entity = self.repository.save(self.mapper.to_entity(dto))
        self.search_repository.index(entity)
        return self.mapper.to_dto(entity)

    def update(self, dto: D) -> D:
        """
        Overwrite the entity carrying the DTO's id.

        Unknown ids are inserted unless ``update_requires_existing`` is
        set, in which case they raise ``NotFoundError`` and nothing is
        written.
        """
        self.logger.debug("Request to update %s : %s", self.entity_name, dto)
        with self.unit_of_work.begin():
            if self.update_requires_existing and self.repository.find_by_id(dto.id) is None:
                raise NotFoundError(self.entity_name, dto.id)
            entity = self.repository.save(self.mapper.to_entity(dto))
        self.search_repository.index(entity)
        return self.mapper.to_dto(entity)

    def partial_update(self, dto: D) -> Optional[D]:
        """
        Merge the fields set on the DTO into the stored entity.

        Returns ``None`` without writing anything when the id is unknown.
        """
        self.logger.debug("Request to partially update %s : %s", self.entity_name, dto)
        with self.unit_of_work.begin():
            existing = self.repository.find_by_id(dto.id)
            if existing is None:
                return None
            self.mapper.partial_update(existing, dto)
            entity = self.repository.save(existing)
        self.search_repository.index(entity)
        return self.mapper.to_dto(entity)

    def find_all(self, page_request: Optional[PageRequest] = None) -> Union[List[D], Page[D]]:
        """All entities as DTOs, or one page of them."""
        self.logger.debug("Request to get all %s", self.entity_plural)
        with self.unit_of_work.begin(read_only=True):
            return self._to_dtos(self.repository.find_all(page_request))

    def find_all_where_relation_is_null(self, relation: str) -> List[D]:
        """
        Entities whose to-one ``relation`` is absent.

        Scans every entity in memory; nothing is pushed down to the store.
        """
        self.logger.debug("Request to get all %s where %s is null", self.entity_plural, relation)
        with self.unit_of_work.begin(read_only=True):
            return [
                self.mapper.to_dto(entity)
                for entity in self.repository.find_all()
                if getattr(entity, relation) is None
            ]

    def find_one(self, id: int) -> Optional[D]:
        """The entity with the given id as a DTO, or ``None``."""
        self.logger.debug("Request to get %s : %s", self.entity_name, id)
        with self.unit_of_work.begin(read_only=True):
            entity = self._find_one(id)
            return self.mapper.to_dto(entity) if entity is not None else None

    def delete(self, id: int) -> None:
        """Delete from the durable store, then from the search index."""
        self.logger.debug("Request to delete %s : %s", self.entity_name, id)
        with self.unit_of_work.begin():
            self.repository.delete_by_id(id)
        self.search_repository.delete_from_index_by_id(id)

    def search(self, query: str, page_request: Optional[PageRequest] = None) -> Union[List[D], Page[D]]:
        """Free-text search through the search index only."""
        self.logger.debug("Request to search %s for query %s", self.entity_plural, query)
        return self._to_dtos(self.search_repository.search(query, page_request))

    def _find_one(self, id: int) -> Optional[E]:
        return self.repository.find_by_id(id)

    def _to_dtos(self, result: Union[List[E], Page[E]]) -> Union[List[D], Page[D]]:
        if isinstance(result, Page):
            return result.map(self.mapper.to_dto)
        return self.mapper.to_dtos(result)
