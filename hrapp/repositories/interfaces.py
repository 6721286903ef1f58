"""
Collaborator contracts for the entity services.

Services depend on these protocols, never on SQLAlchemy or Redis
directly. ``E`` is the entity type and ``D`` its DTO.
"""

from typing import Iterable, List, Optional, Protocol, TypeVar, Union

from hrapp.core.pagination import Page, PageRequest

E = TypeVar("E")
D = TypeVar("D")


class EntityRepository(Protocol[E]):
    """Durable store access for one entity type."""

    def find_by_id(self, id: int) -> Optional[E]: ...

    def find_all(self, page_request: Optional[PageRequest] = None) -> Union[List[E], Page[E]]: ...

    def find_one_with_eager_relationships(self, id: int) -> Optional[E]: ...

    def find_all_with_eager_relationships(
        self, page_request: Optional[PageRequest] = None
    ) -> Union[List[E], Page[E]]: ...

    def save(self, entity: E) -> E: ...

    def delete_by_id(self, id: int) -> None: ...


class SearchRepository(Protocol[E]):
    """Secondary text index mirroring one entity type."""

    def index(self, entity: E) -> None: ...

    def search(self, query: str, page_request: Optional[PageRequest] = None) -> Union[List[E], Page[E]]: ...

    def delete_from_index_by_id(self, id: int) -> None: ...


class Mapper(Protocol[E, D]):
    """Conversion between an entity and its DTO."""

    def to_entity(self, dto: D) -> E: ...

    def to_dto(self, entity: E) -> D: ...

    def to_dtos(self, entities: Iterable[E]) -> List[D]: ...

    def partial_update(self, entity: E, dto: D) -> None: ...
