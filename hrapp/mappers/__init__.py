"""
DTO/entity mappers.
"""

from hrapp.mappers.base import EntityMapper, detached_reference
from hrapp.mappers.entities import (
    RegionMapper, CountryMapper, LocationMapper,
    DepartmentMapper, EmployeeMapper,
    TaskMapper, JobMapper, JobHistoryMapper,
)

__all__ = [
    "EntityMapper", "detached_reference",
    "RegionMapper", "CountryMapper", "LocationMapper",
    "DepartmentMapper", "EmployeeMapper",
    "TaskMapper", "JobMapper", "JobHistoryMapper",
]
