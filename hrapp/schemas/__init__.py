"""
Pydantic schemas package.

This module imports all DTOs used at the service boundary and provides
a centralized place to access all schema definitions.
"""

from hrapp.schemas.locations import RegionDTO, CountryDTO, LocationDTO
from hrapp.schemas.organization import DepartmentDTO, EmployeeDTO
from hrapp.schemas.jobs import TaskDTO, JobDTO, JobHistoryDTO

# Export all schemas
__all__ = [
    "RegionDTO", "CountryDTO", "LocationDTO",
    "DepartmentDTO", "EmployeeDTO",
    "TaskDTO", "JobDTO", "JobHistoryDTO",
]
