"""
Region REST endpoints.
"""

from fastapi import APIRouter

from hrapp.api.routes.resource import register_entity_routes
from hrapp.schemas import RegionDTO

router = APIRouter()

register_entity_routes(
    router,
    path="regions",
    entity_name="Region",
    get_service=lambda services: services.region(),
    dto_class=RegionDTO,
    filters={"country-is-null": "find_all_where_country_is_null"},
)
