"""
API routes package.

This package contains one route module per entity. Each module provides
the REST endpoints of one entity service.
"""

# Import all route modules for easy access
from hrapp.api.routes import (
    regions, countries, locations, departments,
    employees, tasks, jobs, job_histories,
)

__all__ = [
    "regions",
    "countries",
    "locations",
    "departments",
    "employees",
    "tasks",
    "jobs",
    "job_histories",
]
