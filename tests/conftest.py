"""Shared fixtures for the HR analytics test suite."""

from datetime import date, datetime

import pytest

from hr_analytics.models import EmployeeRecord
from hr_analytics.utils.types import EmploymentStatus

AS_OF = datetime(2024, 1, 1)

SAMPLE_CSV = "\n".join([
    "\ufeffEmployee_Name,EmpID,Department,Position,DateofHire,DateofTermination,Salary,"
    "EmploymentStatus,PerformanceScore,EngagementSurvey,EmpSatisfaction,Age",
    '"Adinolfi, Wilson",10026,Production,Technician I,1/1/2014,,62506,Active,Exceeds,4.6,5,40',
    '"Ait Sidi, Karthikeyan",10084,IT/IS,Sr. DBA,1/1/2020,6/16/2021,104437,Voluntarily Terminated,Fully Meets,4.96,3,47',
    '"Akinkuolie, Sarah",10196,Production,Technician II,1/1/2018,,,Active,Needs Improvement,0,3,35',
    '"Alagbe, Trina",10088,Sales,Area Sales Manager,not a date,,64991,Active,PIP,,4,',
    '"Anderson, Carol",10069,,Technician I,1/1/2022,,50825,Active,,3.5,4,38',
    ",,,,,,,,,,,",
])


@pytest.fixture
def as_of() -> datetime:
    return AS_OF


@pytest.fixture
def sample_csv() -> str:
    return SAMPLE_CSV


@pytest.fixture
def make_record():
    """Factory for records with sensible defaults; override any field."""
    counter = iter(range(1, 10_000))

    def _make(**overrides) -> EmployeeRecord:
        n = next(counter)
        fields = {
            "employee_id": f"EMP{n:05d}",
            "name": f"Employee {n}",
            "department": "Production",
            "position": "Technician",
            "hire_date": date(2020, 1, 1),
            "termination_date": None,
            "salary": 50_000.0,
            "status": EmploymentStatus.ACTIVE,
            "performance_category": "Fully Meets",
            "engagement": 4.0,
            "satisfaction": 4.0,
            "tenure_years": 4.0,
        }
        fields.update(overrides)
        return EmployeeRecord(**fields)

    return _make
