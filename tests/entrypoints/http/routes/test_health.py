from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from car_showcase.entrypoints.http.routes.health import router


@pytest.fixture
def client() -> TestClient:
    test_app = FastAPI()
    test_app.include_router(router)
    return TestClient(test_app, raise_server_exceptions=False)


def test_health_endpoint(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
