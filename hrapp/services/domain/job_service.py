"""
Job Domain Service

Manages jobs together with the tasks they own. Single jobs are always
read with their tasks loaded eagerly; listings can opt in.
"""

from typing import List, Optional, Union

from hrapp.core.pagination import Page, PageRequest
from hrapp.models import Job
from hrapp.schemas import JobDTO
from hrapp.services.base import EntityService


class JobService(EntityService[Job, JobDTO]):
    """Service for managing jobs."""

    entity_name = "Job"
    entity_plural = "Jobs"

    def find_all_with_eager_relationships(
        self, page_request: Optional[PageRequest] = None
    ) -> Union[List[JobDTO], Page[JobDTO]]:
        """Get all the jobs with their tasks loaded in the same lookup."""
        self.logger.debug("Request to get all Jobs with eager relationships")
        with self.unit_of_work.begin(read_only=True):
            return self._to_dtos(self.repository.find_all_with_eager_relationships(page_request))

    def find_all_where_job_history_is_null(self) -> List[JobDTO]:
        """Get all the jobs without a job history entry."""
        return self.find_all_where_relation_is_null("job_history")

    def _find_one(self, id: int) -> Optional[Job]:
        return self.repository.find_one_with_eager_relationships(id)
