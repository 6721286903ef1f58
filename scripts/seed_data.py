#!/usr/bin/env python3
"""
Seed data script for the HR entity services.

Populates the database with realistic mock data using Faker. Everything
goes through the entity services, so the search index is filled in the
same pass.
"""

import sys
import random
from pathlib import Path

# Add the project root to the Python path
project_dir = Path(__file__).parent.parent
sys.path.insert(0, str(project_dir))

from faker import Faker

from hrapp.config.settings import settings
from hrapp.core.database import SessionLocal, create_tables
from hrapp.models import Language
from hrapp.schemas import (
    RegionDTO, CountryDTO, LocationDTO, DepartmentDTO, EmployeeDTO,
    TaskDTO, JobDTO, JobHistoryDTO,
)
from hrapp.search.providers import create_search_provider
from hrapp.services.factory import ServiceFactory

# Initialize Faker
fake = Faker()
Faker.seed(42)  # For reproducible data
random.seed(42)

REGIONS = ["Europe", "Americas", "Asia", "Middle East and Africa"]
DEPARTMENTS = ["Engineering", "Finance", "Human Resources", "Marketing", "Operations", "Sales"]


class DataSeeder:
    """Creates sample entities through the services."""

    def __init__(self):
        self.db = SessionLocal()
        self.services = ServiceFactory(self.db, create_search_provider(settings), settings)

    def close(self):
        """Close database session."""
        self.db.close()

    def seed(self, employee_count: int = 30):
        print("🌍 Creating regions, countries and locations...")
        location_ids = []
        for region_name in REGIONS:
            region = self.services.region().save(RegionDTO(region_name=region_name))
            country = self.services.country().save(
                CountryDTO(country_name=fake.unique.country(), region_id=region.id)
            )
            location = self.services.location().save(LocationDTO(
                street_address=fake.street_address(),
                postal_code=fake.postcode(),
                city=fake.city(),
                state_province=fake.state(),
                country_id=country.id,
            ))
            location_ids.append(location.id)

        print("🏢 Creating departments...")
        department_ids = []
        for index, name in enumerate(DEPARTMENTS):
            # One location per department at most
            location_id = location_ids[index] if index < len(location_ids) else None
            department = self.services.department().save(
                DepartmentDTO(department_name=name, location_id=location_id)
            )
            department_ids.append(department.id)

        print("👥 Creating employees...")
        employee_ids = []
        for _ in range(employee_count):
            first_name, last_name = fake.first_name(), fake.last_name()
            employee = self.services.employee().save(EmployeeDTO(
                first_name=first_name,
                last_name=last_name,
                email=f"{first_name}.{last_name}@{fake.domain_name()}".lower(),
                phone_number=fake.phone_number(),
                hire_date=fake.date_time_between(start_date="-10y", end_date="now"),
                salary=random.randint(30, 150) * 1000,
                commission_pct=random.choice([0, 5, 10, 15]),
                manager_id=random.choice(employee_ids) if employee_ids else None,
                department_id=random.choice(department_ids),
            ))
            employee_ids.append(employee.id)

        print("🧰 Creating tasks and jobs...")
        task_ids = [
            self.services.task().save(TaskDTO(title=fake.bs().title(), description=fake.sentence())).id
            for _ in range(10)
        ]
        job_ids = []
        for employee_id in employee_ids:
            min_salary = random.randint(30, 90) * 1000
            job = self.services.job().save(JobDTO(
                job_title=fake.job(),
                min_salary=min_salary,
                max_salary=min_salary + random.randint(10, 60) * 1000,
                task_ids=random.sample(task_ids, k=random.randint(1, 3)),
                employee_id=employee_id,
            ))
            job_ids.append(job.id)

        print("📜 Creating job history...")
        for job_id, employee_id, department_id in zip(job_ids, employee_ids, department_ids):
            start = fake.date_time_between(start_date="-5y", end_date="-1y")
            self.services.job_history().save(JobHistoryDTO(
                start_date=start,
                end_date=fake.date_time_between(start_date=start, end_date="now"),
                language=random.choice(list(Language)),
                job_id=job_id,
                department_id=department_id,
                employee_id=employee_id,
            ))


def main():
    print("🌱 HR Entity Services Seed Data")
    print("=" * 40)
    create_tables()
    seeder = DataSeeder()
    try:
        seeder.seed()
        print("✅ Seed data created successfully")
    finally:
        seeder.close()


if __name__ == "__main__":
    main()
