"""
Department and Employee SQLAlchemy models.

This module defines the organizational side of the HR domain:
departments located at a Location and the employees working in them,
including the self-referential manager hierarchy.
"""

from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship

from hrapp.core.database import Base
from hrapp.models.types import UTCDateTime


class Department(Base):
    """Department model, owns its one-to-one link to a Location."""
    __tablename__ = "departments"

    id = Column(Integer, primary_key=True, index=True)
    department_name = Column(String(255), nullable=False)
    location_id = Column(Integer, ForeignKey("locations.id"), unique=True, nullable=True)

    location = relationship("Location", back_populates="department")
    employees = relationship("Employee", back_populates="department")

    # Inverse side of JobHistory.department
    job_history = relationship("JobHistory", back_populates="department", uselist=False)

    def __repr__(self):
        return f"<Department(id={self.id}, department_name='{self.department_name}')>"


class Employee(Base):
    """
    Employee model.

    Salary and commission are whole amounts. An employee may report to
    a manager (another Employee) and belong to one Department.
    """
    __tablename__ = "employees"

    id = Column(Integer, primary_key=True, index=True)
    first_name = Column(String(100), nullable=True)
    last_name = Column(String(100), nullable=True)
    email = Column(String(255), nullable=True)
    phone_number = Column(String(50), nullable=True)
    hire_date = Column(UTCDateTime, nullable=True)
    salary = Column(Integer, nullable=True)
    commission_pct = Column(Integer, nullable=True)

    manager_id = Column(Integer, ForeignKey("employees.id"), nullable=True)
    department_id = Column(Integer, ForeignKey("departments.id"), nullable=True)

    # Self-referential relationship for the management hierarchy
    manager = relationship("Employee", remote_side=[id], back_populates="subordinates")
    subordinates = relationship("Employee", back_populates="manager")
    department = relationship("Department", back_populates="employees")
    jobs = relationship("Job", back_populates="employee")

    # Inverse side of JobHistory.employee
    job_history = relationship("JobHistory", back_populates="employee", uselist=False)

    def __repr__(self):
        return f"<Employee(id={self.id}, email='{self.email}')>"
