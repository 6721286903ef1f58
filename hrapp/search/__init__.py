"""
Search index adapters.

Documents mirror entity DTOs and are matched on word tokens
(``documents``). Redis is the production backend (``redis_search``);
``hrapp.mocks.SearchIndexMock`` implements the same contract in memory.
``providers`` selects between them from settings.
"""
