"""Shared fixtures for the kennel calendar test suite."""

import datetime as _dt

import pytest

from kennel_py.models import Dog, HeatCycle, Litter, StudJob, StudJobBreeding


# ---------------------------------------------------------------------------
# Dogs
# ---------------------------------------------------------------------------

@pytest.fixture
def dam() -> Dog:
    """Female with two recorded heats, 200 days apart; the second was bred."""
    return Dog(
        id="dam-1",
        name="Bella Rose",
        sex="female",
        heatCycles=[
            HeatCycle(id="hc-1", startDate="2024-01-10", endDate="2024-01-31"),
            HeatCycle(
                id="hc-2",
                startDate="2024-07-28",
                bred=True,
                breedingDates=["2024-08-07", "2024-08-09"],
            ),
        ],
    )


@pytest.fixture
def stud() -> Dog:
    return Dog(id="stud-1", name="Duke", sex="male")


@pytest.fixture
def dogs(dam, stud) -> list:
    return [dam, stud]


# ---------------------------------------------------------------------------
# Litters and stud jobs
# ---------------------------------------------------------------------------

@pytest.fixture
def pregnant_litter() -> Litter:
    return Litter(
        id="litter-1",
        litterName="Spring Litter",
        damId="dam-1",
        sireId="stud-1",
        status="pregnant",
        expectedDateOfBirth="2025-03-10",
    )


@pytest.fixture
def completed_stud_job() -> StudJob:
    return StudJob(
        id="job-1",
        studId="stud-1",
        femaleDogName="Daisy",
        status="in_progress",
        breedings=[
            StudJobBreeding(id="b-1", date="2025-01-01", method="ai", status="completed"),
        ],
    )


@pytest.fixture
def today() -> _dt.date:
    return _dt.date(2025, 1, 15)
