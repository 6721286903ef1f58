"""
Repositories for each entity of the HR domain.
"""

from hrapp.models import Region, Country, Location, Department, Employee, Task, Job, JobHistory
from hrapp.repositories.base import SqlAlchemyRepository


class RegionRepository(SqlAlchemyRepository[Region]):
    entity_class = Region


class CountryRepository(SqlAlchemyRepository[Country]):
    entity_class = Country


class LocationRepository(SqlAlchemyRepository[Location]):
    entity_class = Location


class DepartmentRepository(SqlAlchemyRepository[Department]):
    entity_class = Department


class EmployeeRepository(SqlAlchemyRepository[Employee]):
    entity_class = Employee


class TaskRepository(SqlAlchemyRepository[Task]):
    entity_class = Task


class JobRepository(SqlAlchemyRepository[Job]):
    """Jobs can be read together with their tasks."""
    entity_class = Job
    eager_relationships = ("tasks",)


class JobHistoryRepository(SqlAlchemyRepository[JobHistory]):
    entity_class = JobHistory
