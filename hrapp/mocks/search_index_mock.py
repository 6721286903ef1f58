"""
Search Index Mock

In-memory implementation of the search index for testing and development.
Follows the same document and matching rules as the Redis backend and
records every call so tests can assert that writes were mirrored.
"""

import logging
import random
from typing import Any, Dict, List, Optional, Tuple, Union

from hrapp.core.pagination import Page, PageRequest, sort_items
from hrapp.mappers.base import EntityMapper
from hrapp.repositories.base import check_sort_fields
from hrapp.search.documents import document_terms, is_match_all, tokenize

logger = logging.getLogger(__name__)


class SearchIndexError(Exception):
    """Simulated search backend failure."""


class SearchIndexMock:
    """Mock search index for one entity type."""

    def __init__(self, mapper: EntityMapper, index_name: str = "mock", failure_rate: float = 0.0):
        self.mapper = mapper
        self.index_name = index_name
        self.failure_rate = failure_rate

        # In-memory storage
        self._documents: Dict[int, Dict[str, Any]] = {}
        self._terms: Dict[int, set] = {}

        # Call log
        self.calls: List[Tuple[str, Any]] = []
        self._pending_failure: Optional[Exception] = None

        logger.info(f"SearchIndexMock initialized: {index_name}")

    def index(self, entity) -> None:
        """Store or replace the document of an entity."""
        self._before_call()
        document = self.mapper.to_dto(entity).model_dump(mode="json")
        self.calls.append(("index", document["id"]))
        self._documents[document["id"]] = document
        self._terms[document["id"]] = document_terms(document)

    def delete_from_index_by_id(self, id: int) -> None:
        """Remove a document; unknown ids are ignored."""
        self._before_call()
        self.calls.append(("delete", id))
        self._documents.pop(id, None)
        self._terms.pop(id, None)

    def search(self, query: str, page_request: Optional[PageRequest] = None) -> Union[List, Page]:
        """Find entities whose documents contain every query token."""
        self._before_call()
        self.calls.append(("search", query))
        if page_request is not None:
            check_sort_fields(self.mapper.entity_class, page_request)

        terms = tokenize(query)
        if is_match_all(query):
            ids = sorted(self._documents)
        elif not terms:
            ids = []
        else:
            ids = sorted(doc_id for doc_id, doc_terms in self._terms.items() if terms <= doc_terms)

        entities = [
            self.mapper.to_entity(self.mapper.dto_class.model_validate(self._documents[doc_id]))
            for doc_id in ids
        ]
        if page_request is None:
            return entities
        return Page.of(sort_items(entities, page_request.sort_orders()), page_request)

    def document(self, id: int) -> Optional[Dict[str, Any]]:
        """Stored document for an id, if any."""
        return self._documents.get(id)

    def fail_next(self, error: Optional[Exception] = None) -> None:
        """Make the next call raise ``error``."""
        self._pending_failure = error or SearchIndexError("Search index unavailable")

    def get_metrics(self) -> Dict[str, Any]:
        """Get index metrics."""
        return {
            "documents": len(self._documents),
            "total_calls": len(self.calls),
        }

    def _before_call(self) -> None:
        if self._pending_failure is not None:
            error, self._pending_failure = self._pending_failure, None
            raise error
        if random.random() < self.failure_rate:
            raise SearchIndexError("Search index connection error")
