"""Test suite for GetCarById use case."""

from __future__ import annotations

from decimal import Decimal
from unittest.mock import Mock

import pytest

from car_showcase.domain.car import Car
from car_showcase.domain.errors import NotFoundError, ValidationError
from car_showcase.ports.car_catalog_repository import CarCatalogRepository
from car_showcase.use_cases.get_car_by_id import (
    GetCarById,
    GetCarByIdRequest,
    GetCarByIdResponse,
)


@pytest.fixture()
def mock_repository() -> Mock:
    """Mock CarCatalogRepository."""
    return Mock(spec=CarCatalogRepository)


@pytest.fixture()
def sample_car() -> Car:
    return Car(id=1, make="Toyota", model="Camry", year=2022, price=Decimal("28500.00"))


@pytest.mark.asyncio
async def test_execute_successful_get(mock_repository: Mock, sample_car: Car) -> None:
    mock_repository.get_by_id.return_value = sample_car
    use_case = GetCarById(car_catalog_repository=mock_repository)

    result = await use_case.execute(GetCarByIdRequest(car_id=1))

    assert isinstance(result, GetCarByIdResponse)
    assert result.car == sample_car
    mock_repository.get_by_id.assert_awaited_once_with(1)


@pytest.mark.asyncio
async def test_execute_returns_sold_car(mock_repository: Mock, sample_car: Car) -> None:
    sample_car.is_available = False
    mock_repository.get_by_id.return_value = sample_car
    use_case = GetCarById(car_catalog_repository=mock_repository)

    result = await use_case.execute(GetCarByIdRequest(car_id=1))

    assert result.car.is_available is False


@pytest.mark.asyncio
async def test_execute_raises_not_found(mock_repository: Mock) -> None:
    mock_repository.get_by_id.return_value = None
    use_case = GetCarById(car_catalog_repository=mock_repository)

    with pytest.raises(NotFoundError) as exc_info:
        await use_case.execute(GetCarByIdRequest(car_id=99))

    assert exc_info.value.message == "Car with identifier '99' not found"
    assert exc_info.value.context == {"resource": "Car", "identifier": "99"}


@pytest.mark.asyncio
@pytest.mark.parametrize("car_id", [0, -1])
async def test_execute_rejects_non_positive_id(mock_repository: Mock, car_id: int) -> None:
    use_case = GetCarById(car_catalog_repository=mock_repository)

    with pytest.raises(ValidationError) as exc_info:
        await use_case.execute(GetCarByIdRequest(car_id=car_id))

    assert exc_info.value.errors == [
        {"field": "car_id", "message": "Must be a positive integer", "code": "INVALID_ID"}
    ]
    mock_repository.get_by_id.assert_not_called()
