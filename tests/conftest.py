from __future__ import annotations

from dataclasses import dataclass

import pytest

from bulkwire import BulkIndexRequest


@dataclass
class Employee:
    user: str
    city: str = ""
    age: int = 0


@pytest.fixture
def employee() -> Employee:
    return Employee(user="olivere")


@pytest.fixture
def request_factory():
    """
    Factory fixture returning a request pre-configured with the usual
    index101/employee/1 coordinates.

    Usage:
        req = request_factory().doc(...)
    """
    def _make() -> BulkIndexRequest:
        return BulkIndexRequest().index("index101").type("employee").id("1")

    return _make


@pytest.fixture
def employee_type() -> type[Employee]:
    return Employee
