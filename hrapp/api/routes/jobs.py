"""
Job REST endpoints. Listing and search are paged; listings accept
``eagerload=true`` to load each job's tasks in the same query.
"""

from fastapi import APIRouter

from hrapp.api.routes.resource import register_entity_routes
from hrapp.schemas import JobDTO

router = APIRouter()

register_entity_routes(
    router,
    path="jobs",
    entity_name="Job",
    get_service=lambda services: services.job(),
    dto_class=JobDTO,
    paged=True,
    filters={"jobhistory-is-null": "find_all_where_job_history_is_null"},
    eager_load=True,
)
