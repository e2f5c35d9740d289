"""Pytest configuration and shared fixtures."""

import pytest
from datetime import datetime, timezone
from typing import Dict, Any, List

from studio_core.data.models import ClientRef, NamedSeries, ProjectRecord


@pytest.fixture
def reference_now() -> datetime:
    """Fixed reference time in April 2024."""
    return datetime(2024, 4, 10, 9, 30, 0, tzinfo=timezone.utc)


@pytest.fixture
def active_project() -> ProjectRecord:
    """Active project with both shoot dates in February 2024."""
    return ProjectRecord(
        id="1",
        code="PRJ001",
        name="Wedding",
        status="active",
        shoot_start_date="2024-02-15T10:00:00Z",
        shoot_end_date="2024-02-16T18:00:00Z",
        amount=60000.0,
        pending_amount=20000.0,
        client=ClientRef(name="Asha", company="Asha Events"),
        location="Mumbai",
    )


@pytest.fixture
def completed_project() -> ProjectRecord:
    """Completed project starting on the same day as the active one."""
    return ProjectRecord(
        id="2",
        code="PRJ002",
        name="Corporate Headshots",
        status="completed",
        shoot_start_date="2024-02-15T08:00:00Z",
        shoot_end_date=None,
        amount=15000.0,
        pending_amount=0.0,
    )


@pytest.fixture
def sample_projects_payload() -> List[Dict[str, Any]]:
    """Raw project payloads as returned by the backend."""
    return [
        {
            "id": 1,
            "code": "PRJ001",
            "name": "Wedding",
            "status": "ACTIVE",
            "shootStartDate": "2024-02-15T10:00:00Z",
            "shootEndDate": "2024-02-16T18:00:00Z",
            "amount": 60000,
            "pendingAmt": 20000,
            "receivedAmt": 40000,
            "outsourcing": False,
            "client": {"name": "Asha", "company": "Asha Events"},
        },
        {
            "id": 2,
            "code": "PRJ002",
            "name": "Corporate Headshots",
            "status": "Completed",
            "shootStartDate": "2024-02-20T08:00:00Z",
            "shootEndDate": "not-a-date",
            "amount": 15000,
            "pendingAmt": 0,
            "outsourcing": True,
        },
    ]


@pytest.fixture
def sparse_income_series() -> NamedSeries:
    """Income series reporting only January and March."""
    return NamedSeries(labels=("January", "March"), values=(10, 30))
