from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from car_showcase.adapters.in_memory_car_catalog_repository import InMemoryCarCatalogRepository
from car_showcase.entrypoints.http.dependencies import get_car_catalog_repository
from car_showcase.entrypoints.http.routes.makes import router


@pytest.fixture
def repository() -> InMemoryCarCatalogRepository:
    return InMemoryCarCatalogRepository()


@pytest.fixture
def client(repository: InMemoryCarCatalogRepository) -> TestClient:
    test_app = FastAPI()
    test_app.include_router(router, prefix="/v1")
    test_app.dependency_overrides[get_car_catalog_repository] = lambda: repository
    return TestClient(test_app)


def test_list_makes(client: TestClient) -> None:
    response = client.get("/v1/makes")

    assert response.status_code == 200
    assert response.json() == {"makes": ["Audi", "BMW", "Ford", "Honda", "Tesla", "Toyota"]}


def test_list_models(client: TestClient) -> None:
    response = client.get("/v1/makes/ford/models")

    assert response.status_code == 200
    assert response.json() == {"make": "ford", "models": ["F-150"]}


def test_list_models_unknown_make(client: TestClient) -> None:
    assert client.get("/v1/makes/NonExistentMake/models").json()["models"] == []
