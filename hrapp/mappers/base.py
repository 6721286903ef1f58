"""
Entity/DTO mapping.

A mapper copies a fixed list of attributes between an entity and its
DTO. Relations are carried as foreign key columns, so to-one links
need no lookup; collection links are resolved through the mapper's
reference loader.
"""

from typing import Callable, Generic, Iterable, List, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel

E = TypeVar('E')
D = TypeVar('D', bound=BaseModel)

ReferenceLoader = Callable[[type, int], object]


def detached_reference(entity_class: type, id: int):
    """Reference carrying only an id; never attached to a session."""
    return entity_class(id=id)


class EntityMapper(Generic[E, D]):
    """Bidirectional conversion between one entity class and its DTO."""

    entity_class: Type[E] = None
    dto_class: Type[D] = None
    # Attributes with the same name on both sides, id included
    fields: Tuple[str, ...] = ()

    def __init__(self, reference_loader: Optional[ReferenceLoader] = None):
        self.reference_loader = reference_loader or detached_reference

    def to_entity(self, dto: D) -> E:
        entity = self.entity_class()
        for name in self.fields:
            setattr(entity, name, getattr(dto, name))
        self._relations_to_entity(dto, entity)
        return entity

    def to_dto(self, entity: E) -> D:
        data = {name: getattr(entity, name) for name in self.fields}
        data.update(self._relations_to_dto(entity))
        return self.dto_class(**data)

    def to_dtos(self, entities: Iterable[E]) -> List[D]:
        return [self.to_dto(entity) for entity in entities]

    def partial_update(self, entity: E, dto: D) -> None:
        """
        Merge the fields explicitly set on ``dto`` into ``entity``.

        Fields the caller never set keep their stored value; a field
        explicitly set to ``None`` clears it. The id is never changed.
        """
        present = dto.model_fields_set - {"id"}
        for name in self.fields:
            if name in present:
                setattr(entity, name, getattr(dto, name))
        self._merge_relations(entity, dto, present)

    # Hooks for collection relations
    def _relations_to_entity(self, dto: D, entity: E) -> None:
        pass

    def _relations_to_dto(self, entity: E) -> dict:
        return {}

    def _merge_relations(self, entity: E, dto: D, present: set) -> None:
        pass
