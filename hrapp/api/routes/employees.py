"""
Employee REST endpoints. Listing and search are paged.
"""

from fastapi import APIRouter

from hrapp.api.routes.resource import register_entity_routes
from hrapp.schemas import EmployeeDTO

router = APIRouter()

register_entity_routes(
    router,
    path="employees",
    entity_name="Employee",
    get_service=lambda services: services.employee(),
    dto_class=EmployeeDTO,
    paged=True,
    filters={"jobhistory-is-null": "find_all_where_job_history_is_null"},
)
