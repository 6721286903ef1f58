"""
Mappers for each entity of the HR domain.
"""

from hrapp.mappers.base import EntityMapper
from hrapp.models import Region, Country, Location, Department, Employee, Task, Job, JobHistory
from hrapp.schemas import (
    RegionDTO, CountryDTO, LocationDTO, DepartmentDTO, EmployeeDTO,
    TaskDTO, JobDTO, JobHistoryDTO,
)


class RegionMapper(EntityMapper[Region, RegionDTO]):
    entity_class = Region
    dto_class = RegionDTO
    fields = ("id", "region_name")


class CountryMapper(EntityMapper[Country, CountryDTO]):
    entity_class = Country
    dto_class = CountryDTO
    fields = ("id", "country_name", "region_id")


class LocationMapper(EntityMapper[Location, LocationDTO]):
    entity_class = Location
    dto_class = LocationDTO
    fields = ("id", "street_address", "postal_code", "city", "state_province", "country_id")


class DepartmentMapper(EntityMapper[Department, DepartmentDTO]):
    entity_class = Department
    dto_class = DepartmentDTO
    fields = ("id", "department_name", "location_id")


class EmployeeMapper(EntityMapper[Employee, EmployeeDTO]):
    entity_class = Employee
    dto_class = EmployeeDTO
    fields = (
        "id", "first_name", "last_name", "email", "phone_number",
        "hire_date", "salary", "commission_pct", "manager_id", "department_id",
    )


class TaskMapper(EntityMapper[Task, TaskDTO]):
    entity_class = Task
    dto_class = TaskDTO
    fields = ("id", "title", "description")


class JobMapper(EntityMapper[Job, JobDTO]):
    """Jobs also carry the ids of the tasks they own."""
    entity_class = Job
    dto_class = JobDTO
    fields = ("id", "job_title", "min_salary", "max_salary", "employee_id")

    def _relations_to_entity(self, dto, entity):
        entity.tasks = self._tasks(dto.task_ids)

    def _relations_to_dto(self, entity):
        return {"task_ids": [task.id for task in entity.tasks]}

    def _merge_relations(self, entity, dto, present):
        if "task_ids" in present:
            entity.tasks = self._tasks(dto.task_ids)

    def _tasks(self, task_ids):
        # Duplicates collapse, as in a set
        return [self.reference_loader(Task, task_id) for task_id in dict.fromkeys(task_ids or [])]


class JobHistoryMapper(EntityMapper[JobHistory, JobHistoryDTO]):
    entity_class = JobHistory
    dto_class = JobHistoryDTO
    fields = ("id", "start_date", "end_date", "language", "job_id", "department_id", "employee_id")
