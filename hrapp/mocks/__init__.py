"""
External System Mocks

This module provides mock implementations of external systems for testing and
development purposes. These mocks simulate the behavior of real external services
without requiring actual connections.

Available Mock Systems:
======================

1. **SearchIndexMock** - In-memory search index with call recording

Usage Examples:
==============

```python
from hrapp.mappers import CountryMapper
from hrapp.mocks import SearchIndexMock

index = SearchIndexMock(CountryMapper(), index_name="country")
index.fail_next()  # the next call raises SearchIndexError
```

Environment Integration:
=======================

Set ``SEARCH_BACKEND=memory`` to serve the API from in-memory indices
instead of Redis.
"""

from .search_index_mock import SearchIndexMock, SearchIndexError

__all__ = [
    'SearchIndexMock',
    'SearchIndexError',
]
