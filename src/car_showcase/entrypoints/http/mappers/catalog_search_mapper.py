from __future__ import annotations

from decimal import Decimal

from car_showcase.domain.car import CatalogFilters, Paging
from car_showcase.entrypoints.http.dtos.catalog_search import (
    CarsSearchQueryDTO,
    CatalogSearchResponseDTO,
)
from car_showcase.entrypoints.http.mappers.car_mapper import CarMapper
from car_showcase.use_cases.search_car_catalog import (
    SearchCarCatalogRequest,
    SearchCarCatalogResponse,
)


class CatalogSearchMapper:
    """Maps between REST DTOs and domain models for catalog search."""

    @staticmethod
    def to_domain_filters(dto: CarsSearchQueryDTO) -> CatalogFilters:
        """
        Converts query params to domain filters, handling Decimal conversion.

        Args:
            dto: The data transfer object containing search query parameters

        Returns:
            CatalogFilters: Domain filters with a Decimal price
        """
        return CatalogFilters(
            make=dto.make,
            model=dto.model,
            year_min=dto.year_min,
            year_max=dto.year_max,
            price_max=Decimal(dto.price_max) if dto.price_max else None,
        )

    @staticmethod
    def to_domain_paging(dto: CarsSearchQueryDTO, default_limit: int) -> Paging:
        """
        Converts pagination params to domain paging object.

        Args:
            dto: The data transfer object containing search query parameters
            default_limit: Page size used when the query omits limit

        Returns:
            Paging: Domain paging object
        """
        return Paging(offset=dto.offset, limit=dto.limit or default_limit)

    @staticmethod
    def to_domain_request(dto: CarsSearchQueryDTO, default_limit: int) -> SearchCarCatalogRequest:
        """
        Convenience method: builds complete domain request from DTO.

        Args:
            dto: The data transfer object containing search query parameters
            default_limit: Page size used when the query omits limit

        Returns:
            SearchCarCatalogRequest: Complete domain request with filters, sort and paging
        """
        return SearchCarCatalogRequest(
            filters=CatalogSearchMapper.to_domain_filters(dto),
            sort=dto.sort,
            paging=CatalogSearchMapper.to_domain_paging(dto, default_limit),
        )

    @staticmethod
    def to_response(result: SearchCarCatalogResponse, paging: Paging) -> CatalogSearchResponseDTO:
        """
        Converts domain search result to REST response with pagination metadata.

        Args:
            result: Domain search result containing the page and total count
            paging: Paging actually applied (echoed back to the client)

        Returns:
            CatalogSearchResponseDTO: REST response with cars and pagination metadata
        """
        return CatalogSearchResponseDTO(
            cars=[CarMapper.to_response(car) for car in result.cars],
            total=result.total_count,
            offset=paging.offset,
            limit=paging.limit,
            total_pages=result.total_pages,
        )
