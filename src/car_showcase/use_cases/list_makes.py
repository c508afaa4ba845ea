"""Make/model facets for the search filters."""

from __future__ import annotations

from car_showcase.ports.car_catalog_repository import CarCatalogRepository


class ListMakes:
    """Distinct makes across the whole catalog, sold cars included."""

    def __init__(self, car_catalog_repository: CarCatalogRepository) -> None:
        self._repository = car_catalog_repository

    async def execute(self) -> list[str]:
        return await self._repository.get_makes()


class ListModels:
    """Distinct models of one make. An unknown make yields an empty list."""

    def __init__(self, car_catalog_repository: CarCatalogRepository) -> None:
        self._repository = car_catalog_repository

    async def execute(self, make: str) -> list[str]:
        return await self._repository.get_models(make)
