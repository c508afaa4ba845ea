"""Update car use case."""

from __future__ import annotations

from dataclasses import dataclass

from car_showcase.domain.car import Car
from car_showcase.domain.errors import NotFoundError
from car_showcase.ports.car_catalog_repository import CarCatalogRepository
from car_showcase.use_cases.get_car_by_id import validate_car_id


@dataclass(frozen=True, slots=True)
class UpdateCarRequest:
    car: Car


@dataclass(frozen=True, slots=True)
class UpdateCarResponse:
    car: Car


class UpdateCar:
    """
    Use case for replacing a stored car.

    The stored record is fully replaced (no field merge) and keeps its
    position in the catalog.
    """

    def __init__(self, car_catalog_repository: CarCatalogRepository) -> None:
        self._repository = car_catalog_repository

    async def execute(self, request: UpdateCarRequest) -> UpdateCarResponse:
        """
        Raises:
            ValidationError: If the id or the listing fields are invalid
            NotFoundError: If no stored car has the given id
        """
        validate_car_id(request.car.id)
        request.car.validate()

        if not await self._repository.update(request.car):
            raise NotFoundError(resource="Car", identifier=str(request.car.id))

        return UpdateCarResponse(car=request.car)
