"""
JobHistory REST endpoints. Listing and search are paged.
"""

from fastapi import APIRouter

from hrapp.api.routes.resource import register_entity_routes
from hrapp.schemas import JobHistoryDTO

router = APIRouter()

register_entity_routes(
    router,
    path="job-histories",
    entity_name="JobHistory",
    get_service=lambda services: services.job_history(),
    dto_class=JobHistoryDTO,
    paged=True,
)
