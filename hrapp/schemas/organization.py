"""
Pydantic DTOs for Department and Employee.

This module defines the transport shapes used at the service boundary
for the organizational entities.
"""

from pydantic import BaseModel, field_validator
from typing import Optional
from datetime import datetime

from hrapp.models.types import to_utc


class DepartmentDTO(BaseModel):
    """Transport shape of a Department."""
    id: Optional[int] = None
    department_name: Optional[str] = None
    location_id: Optional[int] = None


class EmployeeDTO(BaseModel):
    """Transport shape of an Employee."""
    id: Optional[int] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone_number: Optional[str] = None
    hire_date: Optional[datetime] = None
    salary: Optional[int] = None
    commission_pct: Optional[int] = None
    manager_id: Optional[int] = None
    department_id: Optional[int] = None

    @field_validator('email')
    @classmethod
    def email_format(cls, v):
        """Validate basic email format."""
        if v is not None and '@' not in v:
            raise ValueError('Invalid email format')
        return v

    @field_validator('salary', 'commission_pct')
    @classmethod
    def non_negative_amounts(cls, v):
        """Validate that salary and commission are not negative."""
        if v is not None and v < 0:
            raise ValueError('Salary and commission must not be negative')
        return v

    @field_validator('hire_date')
    @classmethod
    def hire_date_as_utc(cls, v):
        """Store hire dates as UTC instants; naive values are UTC."""
        return to_utc(v)
