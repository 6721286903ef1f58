"""
SQLAlchemy repository adapter.

One repository instance is bound to one request-scoped session and one
entity class. Repositories only flush; committing is left to the unit
of work opened by the calling service.
"""

import logging
from typing import Generic, List, Optional, Tuple, Type, TypeVar, Union

from sqlalchemy import func, inspect as sa_inspect, select
from sqlalchemy.orm import Session, selectinload

from hrapp.core.pagination import InvalidPageRequest, Page, PageRequest

logger = logging.getLogger(__name__)

E = TypeVar('E')


def sortable_columns(entity_class: type) -> List[str]:
    """Attribute names of the mapped columns of an entity class."""
    return list(sa_inspect(entity_class).columns.keys())


def check_sort_fields(entity_class: type, page_request: PageRequest) -> None:
    """Reject sort expressions naming a property the entity does not have."""
    allowed = sortable_columns(entity_class)
    for name, _ in page_request.sort_orders():
        if name not in allowed:
            raise InvalidPageRequest(f"Cannot sort {entity_class.__name__} by '{name}'")


class SqlAlchemyRepository(Generic[E]):
    """Durable store access for one entity type."""

    entity_class: Type[E] = None
    # Collection relationships loaded together with the entity on request
    eager_relationships: Tuple[str, ...] = ()

    def __init__(self, session: Session, entity_class: Type[E] = None):
        self.session = session
        if entity_class is not None:
            self.entity_class = entity_class
        if self.entity_class is None:
            raise TypeError(f"{self.__class__.__name__} has no entity class")

    def find_by_id(self, id: int) -> Optional[E]:
        if id is None:
            return None
        return self.session.get(self.entity_class, id)

    def find_all(self, page_request: Optional[PageRequest] = None) -> Union[List[E], Page[E]]:
        return self._find(select(self.entity_class), page_request)

    def find_one_with_eager_relationships(self, id: int) -> Optional[E]:
        if id is None:
            return None
        stmt = (
            select(self.entity_class)
            .options(*self._eager_options())
            .where(self.entity_class.id == id)
        )
        return self.session.scalars(stmt).first()

    def find_all_with_eager_relationships(
        self, page_request: Optional[PageRequest] = None
    ) -> Union[List[E], Page[E]]:
        stmt = select(self.entity_class).options(*self._eager_options())
        return self._find(stmt, page_request)

    def get_reference(self, entity_class: type, id: int):
        """
        Resolve a related entity by id.

        Raises ``sqlalchemy.exc.NoResultFound`` for unknown ids so a DTO
        cannot point at a row that does not exist.
        """
        return self.session.get_one(entity_class, id)

    def save(self, entity: E) -> E:
        """
        Insert or overwrite an entity.

        Entities without an id are inserted; entities with an id replace
        the stored row with that id, or are inserted under it.
        """
        saved = self.session.merge(entity)
        self.session.flush()
        logger.debug("Flushed %r", saved)
        return saved

    def delete_by_id(self, id: int) -> None:
        """Delete the entity with the given id; unknown ids are ignored."""
        entity = self.find_by_id(id)
        if entity is None:
            logger.debug("No %s with id %s to delete", self.entity_class.__name__, id)
            return
        self.session.delete(entity)
        self.session.flush()

    def count(self) -> int:
        return self.session.scalar(select(func.count()).select_from(self.entity_class))

    def _find(self, stmt, page_request: Optional[PageRequest]) -> Union[List[E], Page[E]]:
        if page_request is None:
            return list(self.session.scalars(stmt.order_by(self.entity_class.id)))

        stmt = (
            stmt.order_by(*self._order_by(page_request))
            .offset(page_request.offset)
            .limit(page_request.size)
        )
        return Page(
            content=list(self.session.scalars(stmt)),
            page=page_request.page,
            size=page_request.size,
            total_elements=self.count(),
        )

    def _order_by(self, page_request: PageRequest) -> list:
        check_sort_fields(self.entity_class, page_request)
        clauses = []
        for name, descending in page_request.sort_orders():
            column = getattr(self.entity_class, name)
            clauses.append(column.desc() if descending else column.asc())
        # Stable pages regardless of the requested sort
        clauses.append(self.entity_class.id.asc())
        return clauses

    def _eager_options(self) -> list:
        return [selectinload(getattr(self.entity_class, name)) for name in self.eager_relationships]
