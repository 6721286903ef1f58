"""
Location REST endpoints.
"""

from fastapi import APIRouter

from hrapp.api.routes.resource import register_entity_routes
from hrapp.schemas import LocationDTO

router = APIRouter()

register_entity_routes(
    router,
    path="locations",
    entity_name="Location",
    get_service=lambda services: services.location(),
    dto_class=LocationDTO,
    filters={"department-is-null": "find_all_where_department_is_null"},
)
