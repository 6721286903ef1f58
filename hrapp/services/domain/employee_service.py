"""
Employee Domain Service

Manages employees. Listing and search are paged.
"""

from typing import List

from hrapp.models import Employee
from hrapp.schemas import EmployeeDTO
from hrapp.services.base import EntityService


class EmployeeService(EntityService[Employee, EmployeeDTO]):
    """Service for managing employees."""

    entity_name = "Employee"
    entity_plural = "Employees"

    def find_all_where_job_history_is_null(self) -> List[EmployeeDTO]:
        """Get all the employees without a job history entry."""
        return self.find_all_where_relation_is_null("job_history")
