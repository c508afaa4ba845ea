"""Add car use case."""

from __future__ import annotations

from dataclasses import dataclass

from car_showcase.domain.car import Car
from car_showcase.domain.errors import InternalError
from car_showcase.ports.car_catalog_repository import CarCatalogRepository


@dataclass(frozen=True, slots=True)
class AddCarRequest:
    car: Car


@dataclass(frozen=True, slots=True)
class AddCarResponse:
    car: Car  # Carries the id and date_added assigned by the store


class AddCar:
    """
    Use case for listing a new car.

    Validates the listing fields, then lets the repository assign the id and
    the date added.
    """

    def __init__(self, car_catalog_repository: CarCatalogRepository) -> None:
        self._repository = car_catalog_repository

    async def execute(self, request: AddCarRequest) -> AddCarResponse:
        """
        Raises:
            ValidationError: If the listing fields are invalid
            InternalError: If the repository refuses a validated car
        """
        request.car.validate()

        if not await self._repository.add(request.car):
            raise InternalError("Catalog rejected the new car")

        return AddCarResponse(car=request.car)
