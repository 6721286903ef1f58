"""
Department REST endpoints.
"""

from fastapi import APIRouter

from hrapp.api.routes.resource import register_entity_routes
from hrapp.schemas import DepartmentDTO

router = APIRouter()

register_entity_routes(
    router,
    path="departments",
    entity_name="Department",
    get_service=lambda services: services.department(),
    dto_class=DepartmentDTO,
    filters={"jobhistory-is-null": "find_all_where_job_history_is_null"},
)
