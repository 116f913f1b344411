"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from cryptopulse.main import app
from cryptopulse.services.analysis import AnalysisService


@pytest.fixture
def service() -> AnalysisService:
    """Fresh analysis service."""
    return AnalysisService()


@pytest.fixture
def client():
    """HTTP client with application lifespan."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def ascending_prices() -> list[float]:
    """20 prices: 100, 101, ..., 119."""
    return [100.0 + i for i in range(20)]


@pytest.fixture
def flat_prices() -> list[float]:
    """30 identical prices."""
    return [100.0] * 30


@pytest.fixture
def long_uptrend() -> list[float]:
    """250 prices rising by 1 from 100."""
    return [100.0 + i for i in range(250)]


@pytest.fixture
def long_downtrend() -> list[float]:
    """250 prices falling by 1 from 300."""
    return [300.0 - i for i in range(250)]


@pytest.fixture
def late_breakout() -> list[float]:
    """39 flat prices followed by a 10% jump."""
    return [100.0] * 39 + [110.0]


@pytest.fixture
def late_breakdown() -> list[float]:
    """39 flat prices followed by a 10% drop."""
    return [100.0] * 39 + [90.0]
