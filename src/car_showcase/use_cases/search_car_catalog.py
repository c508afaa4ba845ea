from __future__ import annotations

from dataclasses import dataclass, field

from car_showcase.domain.car import (
    Car,
    CatalogFilters,
    CatalogSort,
    Paging,
)
from car_showcase.ports.car_catalog_repository import CarCatalogRepository


@dataclass(frozen=True, slots=True)
class SearchCarCatalogRequest:
    filters: CatalogFilters = field(default_factory=CatalogFilters)
    sort: CatalogSort = CatalogSort.DEFAULT
    paging: Paging = field(default_factory=Paging)


@dataclass(frozen=True, slots=True)
class SearchCarCatalogResponse:
    cars: list[Car]
    total_count: int  # Matching cars before paging
    total_pages: int


class SearchCarCatalog:
    """
    Car search catalog with filters, sorting and pagination.

    Filtering belongs to the repository. This use case validates the request,
    then orders and pages whatever the repository matched.
    """

    def __init__(self, car_catalog_repository: CarCatalogRepository) -> None:
        self._repository = car_catalog_repository

    async def execute(self, request: SearchCarCatalogRequest) -> SearchCarCatalogResponse:
        """
        Execute catalog search.

        Args:
            request: Filters, sort order and paging

        Returns:
            Response containing the requested page and the total match count

        Raises:
            PagingValidationError: If paging parameters are invalid
            FilterValidationError: If filter parameters are invalid
        """
        request.filters.validate()
        request.paging.validate()

        matches = await self._repository.search(
            make=request.filters.make,
            model=request.filters.model,
            min_year=request.filters.year_min,
            max_year=request.filters.year_max,
            max_price=request.filters.price_max,
        )
        ordered = request.sort.apply(matches)

        return SearchCarCatalogResponse(
            cars=request.paging.slice(ordered),
            total_count=len(ordered),
            total_pages=request.paging.total_pages(len(ordered)),
        )
