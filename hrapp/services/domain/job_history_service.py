"""
JobHistory Domain Service

Manages job history entries. Listing and search are paged.
"""

from hrapp.models import JobHistory
from hrapp.schemas import JobHistoryDTO
from hrapp.services.base import EntityService


class JobHistoryService(EntityService[JobHistory, JobHistoryDTO]):
    """Service for managing job history entries."""

    entity_name = "JobHistory"
    entity_plural = "JobHistories"
