"""
Redis-backed search index.

Layout per index, under ``<prefix>:<index>``:

- ``doc:<id>``: the search document as JSON
- ``ids``: set of every indexed id
- ``term:<token>``: ids of the documents containing the token
- ``terms:<id>``: tokens of one document, kept for clean removal

Redis errors are not caught here; they reach the caller unchanged.
"""

import json
import logging
from typing import Generic, List, Optional, TypeVar, Union

import redis

from hrapp.config.settings import settings
from hrapp.core.pagination import Page, PageRequest, sort_items
from hrapp.mappers.base import EntityMapper
from hrapp.repositories.base import check_sort_fields
from hrapp.search.documents import document_terms, is_match_all, tokenize

logger = logging.getLogger(__name__)

E = TypeVar('E')


class RedisSearchRepository(Generic[E]):
    """Search index for one entity type stored in Redis."""

    def __init__(
        self,
        client: redis.Redis,
        index_name: str,
        mapper: EntityMapper,
        prefix: Optional[str] = None,
    ):
        self.client = client
        self.index_name = index_name
        self.mapper = mapper
        self.namespace = f"{prefix or settings.search_index_prefix}:{index_name}"

    def _doc_key(self, id) -> str:
        return f"{self.namespace}:doc:{id}"

    def _term_key(self, term: str) -> str:
        return f"{self.namespace}:term:{term}"

    def _terms_key(self, id) -> str:
        return f"{self.namespace}:terms:{id}"

    @property
    def _ids_key(self) -> str:
        return f"{self.namespace}:ids"

    def index(self, entity: E) -> None:
        """Store or replace the document of an entity."""
        document = self.mapper.to_dto(entity).model_dump(mode="json")
        doc_id = str(document["id"])
        terms = document_terms(document)
        previous = self.client.smembers(self._terms_key(doc_id))

        pipe = self.client.pipeline()
        for term in set(previous) - terms:
            pipe.srem(self._term_key(term), doc_id)
        for term in terms:
            pipe.sadd(self._term_key(term), doc_id)
        pipe.delete(self._terms_key(doc_id))
        if terms:
            pipe.sadd(self._terms_key(doc_id), *terms)
        pipe.set(self._doc_key(doc_id), json.dumps(document))
        pipe.sadd(self._ids_key, doc_id)
        pipe.execute()
        logger.debug("Indexed %s document %s (%d terms)", self.index_name, doc_id, len(terms))

    def delete_from_index_by_id(self, id: int) -> None:
        """Remove a document; unknown ids are ignored."""
        doc_id = str(id)
        terms = self.client.smembers(self._terms_key(doc_id))

        pipe = self.client.pipeline()
        for term in terms:
            pipe.srem(self._term_key(term), doc_id)
        pipe.delete(self._terms_key(doc_id), self._doc_key(doc_id))
        pipe.srem(self._ids_key, doc_id)
        pipe.execute()
        logger.debug("Removed %s document %s", self.index_name, doc_id)

    def search(self, query: str, page_request: Optional[PageRequest] = None) -> Union[List[E], Page[E]]:
        """
        Find the entities whose documents contain every query token.

        Results are ordered by id unless the page request sorts them.
        """
        if page_request is not None:
            check_sort_fields(self.mapper.entity_class, page_request)

        terms = tokenize(query)
        if is_match_all(query):
            ids = self.client.smembers(self._ids_key)
        elif not terms:
            ids = set()
        else:
            ids = self.client.sinter([self._term_key(term) for term in terms])

        ordered_ids = sorted(int(doc_id) for doc_id in ids)
        entities = self._load(ordered_ids)
        if page_request is None:
            return entities
        return Page.of(sort_items(entities, page_request.sort_orders()), page_request)

    def _load(self, ids: List[int]) -> List[E]:
        if not ids:
            return []
        raw_documents = self.client.mget([self._doc_key(doc_id) for doc_id in ids])
        return [
            self.mapper.to_entity(self.mapper.dto_class.model_validate_json(raw))
            for raw in raw_documents
            if raw is not None
        ]
