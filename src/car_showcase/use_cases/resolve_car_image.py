"""Resolve the display image of a catalog car."""

from __future__ import annotations

from dataclasses import dataclass

from car_showcase.domain.car_image import ImageStrategy, image_url
from car_showcase.domain.errors import NotFoundError, ValidationError
from car_showcase.ports.car_catalog_repository import CarCatalogRepository
from car_showcase.use_cases.get_car_by_id import validate_car_id


@dataclass(frozen=True, slots=True)
class ResolveCarImageRequest:
    car_id: int
    attempt: int = 0  # Number of load failures the client has seen so far


@dataclass(frozen=True, slots=True)
class ResolveCarImageResponse:
    car_id: int
    strategy: ImageStrategy
    url: str

    @property
    def is_final(self) -> bool:
        return self.strategy.is_terminal


class ResolveCarImage:
    """
    Stateless counterpart of ImageResolver for remote clients.

    The client keeps its own failure count per displayed car and asks for
    the URL of its next attempt; attempts past the last strategy keep
    returning the inline SVG.
    """

    def __init__(self, car_catalog_repository: CarCatalogRepository) -> None:
        self._repository = car_catalog_repository

    async def execute(self, request: ResolveCarImageRequest) -> ResolveCarImageResponse:
        """
        Raises:
            ValidationError: If car_id or attempt is out of range
            NotFoundError: If no stored car has the given id
        """
        validate_car_id(request.car_id)
        if request.attempt < 0:
            raise ValidationError(
                errors=[{"field": "attempt", "message": "Must be >= 0", "code": "NEGATIVE"}]
            )

        car = await self._repository.get_by_id(request.car_id)
        if car is None:
            raise NotFoundError(resource="Car", identifier=str(request.car_id))

        strategy = ImageStrategy.for_attempt(request.attempt)
        return ResolveCarImageResponse(
            car_id=car.id,
            strategy=strategy,
            url=image_url(car.make, car.model, strategy),
        )
