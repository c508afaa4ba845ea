"""
Unit tests for FastAPI dependency wiring.

- The catalog store is a cached process-wide singleton
- Use cases are built per request around the injected store
"""

from __future__ import annotations

from types import SimpleNamespace

import pytest

from car_showcase.adapters.in_memory_car_catalog_repository import InMemoryCarCatalogRepository
from car_showcase.entrypoints.http.dependencies import (
    get_add_car_use_case,
    get_car_catalog_repository,
    get_delete_car_use_case,
    get_get_car_by_id_use_case,
    get_list_makes_use_case,
    get_list_models_use_case,
    get_page_size,
    get_resolve_car_image_use_case,
    get_search_catalog_use_case,
    get_update_car_use_case,
)
from car_showcase.use_cases.add_car import AddCar
from car_showcase.use_cases.delete_car import DeleteCar
from car_showcase.use_cases.get_car_by_id import GetCarById
from car_showcase.use_cases.list_makes import ListMakes, ListModels
from car_showcase.use_cases.resolve_car_image import ResolveCarImage
from car_showcase.use_cases.search_car_catalog import SearchCarCatalog
from car_showcase.use_cases.update_car import UpdateCar


@pytest.fixture(autouse=True)
def fresh_repository_cache():
    get_car_catalog_repository.cache_clear()
    yield
    get_car_catalog_repository.cache_clear()


def test_repository_is_in_memory_singleton() -> None:
    first = get_car_catalog_repository()
    second = get_car_catalog_repository()

    assert isinstance(first, InMemoryCarCatalogRepository)
    assert first is second


def test_cache_clear_resets_repository() -> None:
    first = get_car_catalog_repository()
    get_car_catalog_repository.cache_clear()

    assert get_car_catalog_repository() is not first


@pytest.mark.parametrize(
    ("factory", "use_case_type"),
    [
        (get_search_catalog_use_case, SearchCarCatalog),
        (get_get_car_by_id_use_case, GetCarById),
        (get_add_car_use_case, AddCar),
        (get_update_car_use_case, UpdateCar),
        (get_delete_car_use_case, DeleteCar),
        (get_resolve_car_image_use_case, ResolveCarImage),
        (get_list_makes_use_case, ListMakes),
        (get_list_models_use_case, ListModels),
    ],
)
def test_use_case_factories_wire_repository(factory, use_case_type) -> None:
    repository = InMemoryCarCatalogRepository([])

    first = factory(repository=repository)
    second = factory(repository=repository)

    assert isinstance(first, use_case_type)
    assert first is not second  # per-request instances
    assert first._repository is repository


def test_page_size_prefers_app_state(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CATALOG_DEFAULT_PAGE_SIZE", "4")
    request = SimpleNamespace(app=SimpleNamespace(state=SimpleNamespace(page_size=7)))

    assert get_page_size(request) == 7  # type: ignore[arg-type]


def test_page_size_falls_back_to_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CATALOG_DEFAULT_PAGE_SIZE", "4")
    request = SimpleNamespace(app=SimpleNamespace(state=SimpleNamespace()))

    assert get_page_size(request) == 4  # type: ignore[arg-type]
