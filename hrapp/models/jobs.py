"""
Task, Job and JobHistory SQLAlchemy models.

Jobs own a many-to-many link to the Tasks they involve; a JobHistory
record ties one Job, one Department and one Employee together over
a period of time.
"""

from sqlalchemy import Column, Integer, String, ForeignKey, Table, Enum as SQLEnum
from sqlalchemy.orm import relationship
import enum

from hrapp.core.database import Base
from hrapp.models.types import UTCDateTime


# Association table for the many-to-many relationship between jobs and tasks;
# link rows are removed with either side
job_task_association = Table(
    "rel_job__task",
    Base.metadata,
    Column("job_id", Integer, ForeignKey("jobs.id", ondelete="CASCADE"), primary_key=True),
    Column("task_id", Integer, ForeignKey("tasks.id", ondelete="CASCADE"), primary_key=True),
)


class Language(enum.Enum):
    """Working language recorded on a job history entry."""
    FRENCH = "FRENCH"
    ENGLISH = "ENGLISH"
    SPANISH = "SPANISH"


class Task(Base):
    """Task model, the inverse side of the Job/Task many-to-many."""
    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=True)
    description = Column(String(1000), nullable=True)

    # Read-only: the link is only ever written through Job.tasks
    jobs = relationship("Job", secondary=job_task_association, viewonly=True, order_by="Job.id")

    def __repr__(self):
        return f"<Task(id={self.id}, title='{self.title}')>"


class Job(Base):
    """
    Job model.

    Owns the Job/Task many-to-many and optionally belongs to the
    Employee holding it.
    """
    __tablename__ = "jobs"

    id = Column(Integer, primary_key=True, index=True)
    job_title = Column(String(255), nullable=True)
    min_salary = Column(Integer, nullable=True)
    max_salary = Column(Integer, nullable=True)
    employee_id = Column(Integer, ForeignKey("employees.id"), nullable=True)

    tasks = relationship(
        "Task",
        secondary=job_task_association,
        order_by="Task.id",
    )
    employee = relationship("Employee", back_populates="jobs")

    # Inverse side of JobHistory.job
    job_history = relationship("JobHistory", back_populates="job", uselist=False)

    def __repr__(self):
        return f"<Job(id={self.id}, job_title='{self.job_title}')>"


class JobHistory(Base):
    """JobHistory model recording who held which job, where and when."""
    __tablename__ = "job_histories"

    id = Column(Integer, primary_key=True, index=True)
    start_date = Column(UTCDateTime, nullable=True)
    end_date = Column(UTCDateTime, nullable=True)
    language = Column(SQLEnum(Language), nullable=True)

    job_id = Column(Integer, ForeignKey("jobs.id"), unique=True, nullable=True)
    department_id = Column(Integer, ForeignKey("departments.id"), unique=True, nullable=True)
    employee_id = Column(Integer, ForeignKey("employees.id"), unique=True, nullable=True)

    job = relationship("Job", back_populates="job_history")
    department = relationship("Department", back_populates="job_history")
    employee = relationship("Employee", back_populates="job_history")

    def __repr__(self):
        return f"<JobHistory(id={self.id}, start_date='{self.start_date}')>"
