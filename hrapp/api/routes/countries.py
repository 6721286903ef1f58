"""
Country REST endpoints.
"""

from fastapi import APIRouter

from hrapp.api.routes.resource import register_entity_routes
from hrapp.schemas import CountryDTO

router = APIRouter()

register_entity_routes(
    router,
    path="countries",
    entity_name="Country",
    get_service=lambda services: services.country(),
    dto_class=CountryDTO,
    filters={"location-is-null": "find_all_where_location_is_null"},
)
