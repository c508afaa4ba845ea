"""Get car by ID use case."""

from __future__ import annotations

from dataclasses import dataclass

from car_showcase.domain.car import Car
from car_showcase.domain.errors import NotFoundError, ValidationError
from car_showcase.ports.car_catalog_repository import CarCatalogRepository


@dataclass(frozen=True, slots=True)
class GetCarByIdRequest:
    """Request to get a car by ID."""

    car_id: int


@dataclass(frozen=True, slots=True)
class GetCarByIdResponse:
    """Response containing the requested car."""

    car: Car


def validate_car_id(car_id: int) -> None:
    """
    Raises:
        ValidationError: If car_id is not a positive integer
    """
    if car_id <= 0:
        raise ValidationError(
            errors=[
                {
                    "field": "car_id",
                    "message": "Must be a positive integer",
                    "code": "INVALID_ID",
                }
            ]
        )


class GetCarById:
    """
    Use case for retrieving a single car by ID.

    Responsibilities:
    - Validate car_id (must be a positive integer)
    - Delegate to repository for data access
    - Raise NotFoundError if car doesn't exist

    Sold cars are returned too, so their detail page can show the sold status.
    """

    def __init__(self, car_catalog_repository: CarCatalogRepository) -> None:
        """
        Initialize use case with dependencies.

        Args:
            car_catalog_repository: Repository for car data access
        """
        self._repository = car_catalog_repository

    async def execute(self, request: GetCarByIdRequest) -> GetCarByIdResponse:
        """
        Execute the get car by ID use case.

        Args:
            request: Request containing car_id

        Returns:
            GetCarByIdResponse with the car

        Raises:
            ValidationError: If car_id is not a positive integer
            NotFoundError: If car with given ID doesn't exist
        """
        validate_car_id(request.car_id)

        car = await self._repository.get_by_id(request.car_id)

        if car is None:
            raise NotFoundError(resource="Car", identifier=str(request.car_id))

        return GetCarByIdResponse(car=car)
