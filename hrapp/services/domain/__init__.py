"""
Domain Services

One service per entity of the HR domain. Each is an ``EntityService``
bound to its repository, mapper and search index, and adds the
"where <relation> is null" lookups that apply to its entity.

Available Domain Services:
=========================

1. **RegionService**, **CountryService**, **LocationService** - geography
2. **DepartmentService**, **EmployeeService** - organization
3. **TaskService**, **JobService**, **JobHistoryService** - jobs
"""

from .region_service import RegionService
from .country_service import CountryService
from .location_service import LocationService
from .department_service import DepartmentService
from .employee_service import EmployeeService
from .task_service import TaskService
from .job_service import JobService
from .job_history_service import JobHistoryService

__all__ = [
    'RegionService',
    'CountryService',
    'LocationService',
    'DepartmentService',
    'EmployeeService',
    'TaskService',
    'JobService',
    'JobHistoryService'
]
