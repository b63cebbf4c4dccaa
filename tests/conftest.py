"""Shared test fixtures."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from sgtax.api.routes import router


@pytest.fixture
def income_grid() -> list[int]:
    """Ascending incomes covering every bracket, both CPF branches and the ceilings."""
    boundaries = [0, 20000, 30000, 40000, 80000, 99900, 102000, 111000, 120000, 160000,
                  200000, 240000, 280000, 320000, 500000, 1000000]
    grid = set(range(-10000, 1_200_000, 4_750))
    for boundary in boundaries:
        grid.update({boundary - 1, boundary, boundary + 1})
    grid.add(5_000_000)
    return sorted(grid)


@pytest.fixture
def app() -> FastAPI:
    """Create a test app with the router but no lifespan."""
    test_app = FastAPI()
    test_app.include_router(router)
    return test_app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)
