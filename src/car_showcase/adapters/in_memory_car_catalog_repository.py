from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from decimal import Decimal

from car_showcase.adapters.sample_catalog import sample_cars
from car_showcase.domain.car import Car
from car_showcase.ports.car_catalog_repository import CarCatalogRepository

logger = logging.getLogger(__name__)


class InMemoryCarCatalogRepository(CarCatalogRepository):
    """
    Canonical contract implementation, backing the showcase and the tests.

    - Stores cars in insertion order
    - Applies AND-semantics filtering over available cars
    - Soft deletes: records are never removed
    - Hands out copies, so callers cannot change stored records without update()
    """

    def __init__(self, cars: list[Car] | None = None) -> None:
        self._cars = [replace(car) for car in (sample_cars() if cars is None else cars)]

    async def get_all(self) -> list[Car]:
        return [replace(car) for car in self._cars if car.is_available]

    async def get_by_id(self, car_id: int) -> Car | None:
        car = self._find(car_id)
        return replace(car) if car else None

    async def search(
        self,
        make: str | None = None,
        model: str | None = None,
        min_year: int | None = None,
        max_year: int | None = None,
        max_price: Decimal | None = None,
    ) -> list[Car]:
        matches = (car for car in self._cars if car.is_available)

        if make:
            needle_make = make.lower()
            matches = (car for car in matches if needle_make in car.make.lower())
        if model:
            needle_model = model.lower()
            matches = (car for car in matches if needle_model in car.model.lower())
        if min_year is not None:
            matches = (car for car in matches if car.year >= min_year)
        if max_year is not None:
            matches = (car for car in matches if car.year <= max_year)
        if max_price is not None:
            matches = (car for car in matches if car.price <= max_price)

        return [replace(car) for car in matches]

    async def add(self, car: Car | None) -> bool:
        if car is None:
            return False

        car.id = max((stored.id for stored in self._cars), default=0) + 1
        car.date_added = datetime.now()
        self._cars.append(replace(car))

        logger.info("Car added", extra={"car_id": car.id, "make": car.make, "model": car.model})
        return True

    async def update(self, car: Car | None) -> bool:
        if car is None:
            return False

        for index, stored in enumerate(self._cars):
            if stored.id == car.id:
                self._cars[index] = replace(car)
                logger.info("Car updated", extra={"car_id": car.id})
                return True

        return False

    async def delete(self, car_id: int) -> bool:
        car = self._find(car_id)
        if car is None:
            return False

        car.is_available = False
        logger.info("Car marked unavailable", extra={"car_id": car_id})
        return True

    async def get_makes(self) -> list[str]:
        return sorted({car.make for car in self._cars})

    async def get_models(self, make: str) -> list[str]:
        wanted = make.lower()
        return sorted({car.model for car in self._cars if car.make.lower() == wanted})

    def _find(self, car_id: int) -> Car | None:
        return next((car for car in self._cars if car.id == car_id), None)
