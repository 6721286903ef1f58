"""
Task REST endpoints.
"""

from fastapi import APIRouter

from hrapp.api.routes.resource import register_entity_routes
from hrapp.schemas import TaskDTO

router = APIRouter()

register_entity_routes(
    router,
    path="tasks",
    entity_name="Task",
    get_service=lambda services: services.task(),
    dto_class=TaskDTO,
)
