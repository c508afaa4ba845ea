"""Tests for CatalogSearchMapper and CarMapper."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from car_showcase.domain.car import Car, CatalogFilters, CatalogSort, Paging
from car_showcase.entrypoints.http.dtos.car import CarWriteDTO
from car_showcase.entrypoints.http.dtos.catalog_search import CarsSearchQueryDTO
from car_showcase.entrypoints.http.mappers.car_mapper import CarMapper
from car_showcase.entrypoints.http.mappers.catalog_search_mapper import CatalogSearchMapper
from car_showcase.use_cases.search_car_catalog import SearchCarCatalogResponse


# ==============================================================================
# Query → domain
# ==============================================================================


def test_to_domain_filters_converts_price_to_decimal() -> None:
    dto = CarsSearchQueryDTO(make="Toyota", year_min=2020, price_max="30000.50")

    filters = CatalogSearchMapper.to_domain_filters(dto)

    assert filters == CatalogFilters(make="Toyota", year_min=2020, price_max=Decimal("30000.50"))
    assert isinstance(filters.price_max, Decimal)


def test_to_domain_filters_all_none() -> None:
    assert CatalogSearchMapper.to_domain_filters(CarsSearchQueryDTO()) == CatalogFilters()


def test_to_domain_paging_uses_default_limit_when_omitted() -> None:
    assert CatalogSearchMapper.to_domain_paging(CarsSearchQueryDTO(), default_limit=12) == Paging(
        offset=0, limit=12
    )


def test_to_domain_paging_prefers_explicit_limit() -> None:
    dto = CarsSearchQueryDTO(offset=4, limit=2)

    assert CatalogSearchMapper.to_domain_paging(dto, default_limit=12) == Paging(offset=4, limit=2)


def test_to_domain_request_carries_sort() -> None:
    request = CatalogSearchMapper.to_domain_request(
        CarsSearchQueryDTO(sort=CatalogSort.MILEAGE_ASC), default_limit=12
    )

    assert request.sort is CatalogSort.MILEAGE_ASC
    assert request.filters == CatalogFilters()


def test_query_dto_parses_sort_value() -> None:
    assert CarsSearchQueryDTO.model_validate({"sort": "year-asc"}).sort is CatalogSort.YEAR_ASC


# ==============================================================================
# Domain → response
# ==============================================================================


def test_to_response_echoes_paging() -> None:
    car = Car(id=1, make="Toyota", model="Camry", year=2022, price=Decimal("28500.00"))
    result = SearchCarCatalogResponse(cars=[car], total_count=9, total_pages=5)

    response = CatalogSearchMapper.to_response(result, paging=Paging(offset=2, limit=2))

    assert response.total == 9
    assert response.offset == 2
    assert response.limit == 2
    assert response.total_pages == 5
    assert response.cars[0].price == "28500.00"


def test_car_mapper_round_trips_listing_fields() -> None:
    dto = CarWriteDTO(
        make="Kia",
        model="Rio",
        year=2020,
        price="9999.99",
        color="Blue",
        mileage=1200,
        description="City car",
        is_available=False,
        date_added=datetime(2024, 5, 1),
    )

    car = CarMapper.to_domain(dto, car_id=8)

    assert car.id == 8
    assert car.price == Decimal("9999.99")
    assert car.is_available is False
    assert car.date_added == datetime(2024, 5, 1)

    response = CarMapper.to_response(car)
    assert response.id == 8
    assert response.price == "9999.99"
    assert response.color == "Blue"
    assert response.description == "City car"


def test_car_mapper_defaults_id_and_date() -> None:
    before = datetime.now()

    car = CarMapper.to_domain(CarWriteDTO(make="Kia", model="Rio", year=2020, price="1"))

    assert car.id == 0
    assert car.date_added >= before
