"""
Database models package.

This module imports all SQLAlchemy models to ensure they are
registered with the database metadata for table creation.
"""

# Import all models to register them with SQLAlchemy
from hrapp.models.locations import Region, Country, Location
from hrapp.models.organization import Department, Employee
from hrapp.models.jobs import Task, Job, JobHistory, Language, job_task_association

# Export all models for easy importing
__all__ = [
    # Geography
    "Region",
    "Country",
    "Location",

    # Organization
    "Department",
    "Employee",

    # Jobs
    "Task",
    "Job",
    "JobHistory",
    "job_task_association",

    # Enums
    "Language",
]
