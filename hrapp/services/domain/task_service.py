"""
Task Domain Service
"""

from hrapp.models import Task
from hrapp.schemas import TaskDTO
from hrapp.services.base import EntityService


class TaskService(EntityService[Task, TaskDTO]):
    """Service for managing tasks."""

    entity_name = "Task"
    entity_plural = "Tasks"
