"""
Pytest fixtures for identification engine tests.
"""
from datetime import datetime

import pytest

from mycoid.data import clear_heuristics_cache
from mycoid.services.identification.service import IdentificationService


@pytest.fixture
def september() -> datetime:
    """Clock inside the main UK fruiting season (July-November)"""
    return datetime(2026, 9, 15, 10, 0)


@pytest.fixture
def march() -> datetime:
    """Clock outside the main fruiting season"""
    return datetime(2026, 3, 15, 10, 0)


@pytest.fixture
def service() -> IdentificationService:
    """Service over the shipped genera, rules and seed heuristic table"""
    return IdentificationService()


@pytest.fixture
def fresh_heuristics_cache():
    """Drop cached heuristic tables before and after the test"""
    clear_heuristics_cache()
    yield
    clear_heuristics_cache()
