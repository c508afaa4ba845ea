"""Delete (mark as sold) car use case."""

from __future__ import annotations

from dataclasses import dataclass

from car_showcase.domain.errors import NotFoundError
from car_showcase.ports.car_catalog_repository import CarCatalogRepository
from car_showcase.use_cases.get_car_by_id import validate_car_id


@dataclass(frozen=True, slots=True)
class DeleteCarRequest:
    car_id: int


class DeleteCar:
    """
    Use case for removing a car from the listings.

    Deletion is soft: the car stays retrievable by id with is_available=False
    but drops out of listings and searches.
    """

    def __init__(self, car_catalog_repository: CarCatalogRepository) -> None:
        self._repository = car_catalog_repository

    async def execute(self, request: DeleteCarRequest) -> None:
        """
        Raises:
            ValidationError: If car_id is not a positive integer
            NotFoundError: If no stored car has the given id
        """
        validate_car_id(request.car_id)

        if not await self._repository.delete(request.car_id):
            raise NotFoundError(resource="Car", identifier=str(request.car_id))
