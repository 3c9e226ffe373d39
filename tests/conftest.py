"""
Pytest configuration and shared fixtures

This file contains test fixtures that can be used across all tests.
Fixtures are reusable components that set up test preconditions.

Learn more: https://docs.pytest.org/en/stable/fixture.html
"""

import os
from decimal import Decimal
from typing import Optional

import pytest


@pytest.fixture(scope="session")
def database_url() -> Optional[str]:
    """
    Provide the URL of a disposable test database.

    Integration tests create and drop their own tables, so this is only read
    from JOBS_TEST_DATABASE_URL and never from DATABASE_URL.

    Scope: session (created once per test run)

    Returns:
        PostgreSQL connection URL, or None when not configured
    """
    return os.getenv("JOBS_TEST_DATABASE_URL")


@pytest.fixture(scope="function")
def sample_job_row() -> dict:
    """
    Provide a job row as the store returns it (no id, aliased handle).

    Scope: function (created fresh for each test)

    Returns:
        dict: Sample row
    """
    return {
        "title": "Engineer",
        "salary": 90000,
        "equity": Decimal("0.01"),
        "companyHandle": "acme",
    }


@pytest.fixture(scope="function")
def sample_jobs() -> list[dict]:
    """
    Provide a batch of jobs for listing and filtering tests.

    Two of them pay at least 80k with equity; one has zero equity.

    Scope: function (created fresh for each test)

    Returns:
        list[dict]: Job creation inputs
    """
    return [
        {"title": "Engineer", "salary": 90000, "equity": Decimal("0.01"), "company_handle": "acme"},
        {"title": "Analyst", "salary": 85000, "equity": Decimal("0.005"), "company_handle": "acme"},
        {"title": "Designer", "salary": 95000, "equity": Decimal("0"), "company_handle": "globex"},
    ]


# Mark tests based on their type for selective running
def pytest_configure(config):
    """
    Register custom pytest markers.

    This allows us to run specific test categories:
    - pytest -m unit        (run only unit tests)
    - pytest -m integration (run only integration tests)
    - pytest -m "not slow"  (skip slow tests)
    """
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test (isolated, fast)"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test (requires services)"
    )
    config.addinivalue_line(
        "markers", "slow: mark test as slow running (>1 second)"
    )
