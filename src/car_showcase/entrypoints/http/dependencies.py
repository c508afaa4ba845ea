"""
Dependency injection for FastAPI routes.

Key principle: the catalog store is the one process-wide singleton (it *is*
the data), so it is cached. Use cases are cheap and built per request.
"""

from __future__ import annotations

from functools import lru_cache

from fastapi import Depends, Request

from car_showcase.adapters.in_memory_car_catalog_repository import (
    InMemoryCarCatalogRepository,
)
from car_showcase.infra.config import default_page_size
from car_showcase.ports.car_catalog_repository import CarCatalogRepository
from car_showcase.use_cases.add_car import AddCar
from car_showcase.use_cases.delete_car import DeleteCar
from car_showcase.use_cases.get_car_by_id import GetCarById
from car_showcase.use_cases.list_makes import ListMakes, ListModels
from car_showcase.use_cases.resolve_car_image import ResolveCarImage
from car_showcase.use_cases.search_car_catalog import SearchCarCatalog
from car_showcase.use_cases.update_car import UpdateCar


@lru_cache(maxsize=1)
def get_car_catalog_repository() -> CarCatalogRepository:
    """
    Provides the shared catalog store, seeded with the showcase inventory.

    Tests replace it through app.dependency_overrides or reset it with
    get_car_catalog_repository.cache_clear().
    """
    return InMemoryCarCatalogRepository()


def get_page_size(request: Request) -> int:
    """
    Default page size for catalog searches.

    build_app() validates CATALOG_DEFAULT_PAGE_SIZE once and keeps it on
    app.state; apps assembled without it read the environment directly.
    """
    page_size = getattr(request.app.state, "page_size", None)

    if page_size is None:
        return default_page_size()

    return page_size


def get_search_catalog_use_case(
    repository: CarCatalogRepository = Depends(get_car_catalog_repository),
) -> SearchCarCatalog:
    """
    Factory function that returns a configured SearchCarCatalog use case.

    Args:
        repository: Catalog store (injected by FastAPI)

    Returns:
        SearchCarCatalog: Configured use case instance
    """
    return SearchCarCatalog(car_catalog_repository=repository)


def get_get_car_by_id_use_case(
    repository: CarCatalogRepository = Depends(get_car_catalog_repository),
) -> GetCarById:
    return GetCarById(car_catalog_repository=repository)


def get_add_car_use_case(
    repository: CarCatalogRepository = Depends(get_car_catalog_repository),
) -> AddCar:
    return AddCar(car_catalog_repository=repository)


def get_update_car_use_case(
    repository: CarCatalogRepository = Depends(get_car_catalog_repository),
) -> UpdateCar:
    return UpdateCar(car_catalog_repository=repository)


def get_delete_car_use_case(
    repository: CarCatalogRepository = Depends(get_car_catalog_repository),
) -> DeleteCar:
    return DeleteCar(car_catalog_repository=repository)


def get_resolve_car_image_use_case(
    repository: CarCatalogRepository = Depends(get_car_catalog_repository),
) -> ResolveCarImage:
    return ResolveCarImage(car_catalog_repository=repository)


def get_list_makes_use_case(
    repository: CarCatalogRepository = Depends(get_car_catalog_repository),
) -> ListMakes:
    return ListMakes(car_catalog_repository=repository)


def get_list_models_use_case(
    repository: CarCatalogRepository = Depends(get_car_catalog_repository),
) -> ListModels:
    return ListModels(car_catalog_repository=repository)
