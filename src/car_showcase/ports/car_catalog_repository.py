from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal

from car_showcase.domain.car import Car


class CarCatalogRepository(ABC):
    """
    Port for catalog data access (the catalog store).

    Every operation is a coroutine so a network-backed store can replace the
    in-memory one without touching callers.

    Contract:
        - Listings (get_all, search) only include cars with is_available=True
          and keep store order
        - get_by_id, get_makes and get_models ignore availability
        - Mutations report failure by returning False, never by raising
        - Cars are soft deleted: delete() flips is_available, the record stays
    """

    @abstractmethod
    async def get_all(self) -> list[Car]:
        """Return every available car, in store order."""
        ...

    @abstractmethod
    async def get_by_id(self, car_id: int) -> Car | None:
        """Return the car with ``car_id`` (sold or not), or None."""
        ...

    @abstractmethod
    async def search(
        self,
        make: str | None = None,
        model: str | None = None,
        min_year: int | None = None,
        max_year: int | None = None,
        max_price: Decimal | None = None,
    ) -> list[Car]:
        """
        Search available cars.

        Filters are applied with AND semantics; omitted filters impose no
        constraint.

        Args:
            make: Case-insensitive substring of the make
            model: Case-insensitive substring of the model
            min_year: Minimum year (inclusive)
            max_year: Maximum year (inclusive)
            max_price: Maximum price (inclusive)

        Returns:
            Matching cars in store order (possibly empty)
        """
        ...

    @abstractmethod
    async def add(self, car: Car | None) -> bool:
        """Store ``car`` under a newly assigned id. False if ``car`` is None."""
        ...

    @abstractmethod
    async def update(self, car: Car | None) -> bool:
        """Replace the stored car sharing ``car.id``. False if None or unknown."""
        ...

    @abstractmethod
    async def delete(self, car_id: int) -> bool:
        """Mark the car unavailable. False if ``car_id`` is unknown."""
        ...

    @abstractmethod
    async def get_makes(self) -> list[str]:
        """Distinct makes across all stored cars, sorted ascending."""
        ...

    @abstractmethod
    async def get_models(self, make: str) -> list[str]:
        """Distinct models for ``make`` (case-insensitive exact match), sorted."""
        ...
