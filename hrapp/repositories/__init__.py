"""
Persistence adapters.

Repositories wrap a SQLAlchemy session for one entity type and satisfy
the ``EntityRepository`` contract the services depend on.
"""

from hrapp.repositories.base import SqlAlchemyRepository
from hrapp.repositories.entities import (
    RegionRepository, CountryRepository, LocationRepository,
    DepartmentRepository, EmployeeRepository,
    TaskRepository, JobRepository, JobHistoryRepository,
)

__all__ = [
    "SqlAlchemyRepository",
    "RegionRepository", "CountryRepository", "LocationRepository",
    "DepartmentRepository", "EmployeeRepository",
    "TaskRepository", "JobRepository", "JobHistoryRepository",
]
