"""
Service Layer

Each entity service orchestrates three collaborators for one entity type:
a repository over the durable store, a mapper between entity and DTO,
and a search index kept in step with the store.

Architecture:
============

1. **Base Services** (base.py):
   - Service error hierarchy
   - ``EntityService``, the generic save/update/partial update/find/
     delete/search implementation

2. **Domain Services** (domain/):
   - One ``EntityService`` subclass per entity

3. **Wiring** (factory.py):
   - Builds a service from a session, a search backend and settings

Usage Example:
=============

```python
from hrapp.config.settings import settings
from hrapp.core.database import SessionLocal
from hrapp.schemas import DepartmentDTO
from hrapp.search.providers import create_search_provider
from hrapp.services.factory import ServiceFactory

with SessionLocal() as session:
    services = ServiceFactory(session, create_search_provider(settings))
    department = services.department().save(DepartmentDTO(department_name="IT"))
    services.department().find_one(department.id)
```
"""

from .base import BaseService, EntityService, ServiceError, BadRequestError, NotFoundError
from .domain import *

__all__ = [
    'BaseService',
    'EntityService',
    'ServiceError',
    'BadRequestError',
    'NotFoundError',
]
