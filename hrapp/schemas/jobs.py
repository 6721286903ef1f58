"""
Pydantic DTOs for Task, Job and JobHistory.

Job carries the ids of its tasks since it owns the many-to-many link.
"""

from pydantic import BaseModel, field_validator
from typing import List, Optional
from datetime import datetime

from hrapp.models.jobs import Language
from hrapp.models.types import to_utc


class TaskDTO(BaseModel):
    """Transport shape of a Task."""
    id: Optional[int] = None
    title: Optional[str] = None
    description: Optional[str] = None


class JobDTO(BaseModel):
    """Transport shape of a Job."""
    id: Optional[int] = None
    job_title: Optional[str] = None
    min_salary: Optional[int] = None
    max_salary: Optional[int] = None
    task_ids: Optional[List[int]] = None
    employee_id: Optional[int] = None

    @field_validator('min_salary', 'max_salary')
    @classmethod
    def non_negative_salary(cls, v):
        """Validate that salary bounds are not negative."""
        if v is not None and v < 0:
            raise ValueError('Salary bounds must not be negative')
        return v


class JobHistoryDTO(BaseModel):
    """Transport shape of a JobHistory entry."""
    id: Optional[int] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    language: Optional[Language] = None
    job_id: Optional[int] = None
    department_id: Optional[int] = None
    employee_id: Optional[int] = None

    @field_validator('start_date', 'end_date')
    @classmethod
    def period_as_utc(cls, v):
        """Store the period bounds as UTC instants; naive values are UTC."""
        return to_utc(v)
