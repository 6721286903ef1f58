"""
Service wiring.

A ``ServiceFactory`` is bound to one request-scoped session and builds
entity services whose repository, reference loader and unit of work all
share that session.
"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from hrapp.config.settings import Settings, settings as default_settings
from hrapp.core.database import UnitOfWork
from hrapp.mappers import (
    RegionMapper, CountryMapper, LocationMapper, DepartmentMapper,
    EmployeeMapper, TaskMapper, JobMapper, JobHistoryMapper,
)
from hrapp.repositories import (
    RegionRepository, CountryRepository, LocationRepository, DepartmentRepository,
    EmployeeRepository, TaskRepository, JobRepository, JobHistoryRepository,
)
from hrapp.services.domain import (
    RegionService, CountryService, LocationService, DepartmentService,
    EmployeeService, TaskService, JobService, JobHistoryService,
)


class ServiceFactory:
    """Builds entity services over one session and one search provider."""

    def __init__(self, session: Session, search_provider, config: Optional[Settings] = None):
        self.session = session
        self.search_provider = search_provider
        self.config = config or default_settings
        self.unit_of_work = UnitOfWork(session)

    def _build(self, service_class, repository_class, mapper_class, index_name: str):
        repository = repository_class(self.session)
        return service_class(
            repository=repository,
            mapper=mapper_class(reference_loader=repository.get_reference),
            # Documents are hydrated without touching the durable store
            search_repository=self.search_provider.for_index(index_name, mapper_class()),
            unit_of_work=self.unit_of_work,
            logger=logging.getLogger(f"services.{service_class.__name__}"),
            update_requires_existing=self.config.update_requires_existing,
        )

    def region(self) -> RegionService:
        return self._build(RegionService, RegionRepository, RegionMapper, "region")

    def country(self) -> CountryService:
        return self._build(CountryService, CountryRepository, CountryMapper, "country")

    def location(self) -> LocationService:
        return self._build(LocationService, LocationRepository, LocationMapper, "location")

    def department(self) -> DepartmentService:
        return self._build(DepartmentService, DepartmentRepository, DepartmentMapper, "department")

    def employee(self) -> EmployeeService:
        return self._build(EmployeeService, EmployeeRepository, EmployeeMapper, "employee")

    def task(self) -> TaskService:
        return self._build(TaskService, TaskRepository, TaskMapper, "task")

    def job(self) -> JobService:
        return self._build(JobService, JobRepository, JobMapper, "job")

    def job_history(self) -> JobHistoryService:
        return self._build(JobHistoryService, JobHistoryRepository, JobHistoryMapper, "job_history")
