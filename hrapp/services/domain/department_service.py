"""
Department Domain Service

Manages departments and their location.
"""

from typing import List

from hrapp.models import Department
from hrapp.schemas import DepartmentDTO
from hrapp.services.base import EntityService


class DepartmentService(EntityService[Department, DepartmentDTO]):
    """Service for managing departments."""

    entity_name = "Department"
    entity_plural = "Departments"

    def find_all_where_job_history_is_null(self) -> List[DepartmentDTO]:
        """Get all the departments without a job history entry."""
        return self.find_all_where_relation_is_null("job_history")
