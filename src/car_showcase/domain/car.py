from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Callable, Iterable

from car_showcase.domain.errors import ValidationError


# ==============================================================================
# Domain Exceptions
# ==============================================================================


class PagingValidationError(ValidationError):
    """Raised when paging parameters are invalid."""

    pass


class FilterValidationError(ValidationError):
    """Raised when filter parameters are invalid."""

    pass


MAX_PAGE_LIMIT = 100


@dataclass
class Car:
    """
    One catalog entry.

    ``id`` is 0 until the catalog store assigns one on add; the store writes
    the new id and date_added back onto the instance it was given. Sold cars
    keep their record with ``is_available=False``.
    """

    id: int
    make: str
    model: str
    year: int
    price: Decimal
    color: str = ""
    mileage: int = 0
    fuel_type: str = ""
    transmission: str = ""
    description: str = ""
    image_url: str = ""
    is_available: bool = True
    date_added: datetime = field(default_factory=datetime.now)

    @property
    def title(self) -> str:
        return f"{self.year} {self.make} {self.model}"

    def validate(self) -> None:
        """
        Validate listing fields before they reach the catalog store.

        The store itself accepts anything; these rules guard the write paths.

        Raises:
            ValidationError: With one entry per offending field
        """
        errors: list[dict[str, str]] = []

        if not self.make.strip():
            errors.append({"field": "make", "message": "Must not be empty", "code": "REQUIRED"})
        if not self.model.strip():
            errors.append({"field": "model", "message": "Must not be empty", "code": "REQUIRED"})
        if not isinstance(self.price, Decimal):
            errors.append(
                {"field": "price", "message": "Must be a Decimal", "code": "INVALID_TYPE"}
            )
        elif self.price < 0:
            errors.append({"field": "price", "message": "Must be >= 0", "code": "NEGATIVE"})
        if self.mileage < 0:
            errors.append({"field": "mileage", "message": "Must be >= 0", "code": "NEGATIVE"})

        if errors:
            raise ValidationError(errors=errors)


@dataclass(frozen=True, slots=True)
class CatalogFilters:
    """Optional search criteria, combined with AND semantics."""

    make: str | None = None
    model: str | None = None
    year_min: int | None = None
    year_max: int | None = None
    price_max: Decimal | None = None

    def validate(self) -> None:
        """
        Validate filter parameters.

        Raises:
            FilterValidationError: If filter parameters are invalid
        """
        # Guardrails: prevent float leakage past boundary
        if self.price_max is not None and not isinstance(self.price_max, Decimal):
            raise FilterValidationError(
                "price_max must be Decimal or None (no floats past the boundary)"
            )
        if self.price_max is not None and self.price_max < 0:
            raise FilterValidationError("price_max cannot be negative")

        if (
            self.year_min is not None
            and self.year_max is not None
            and self.year_min > self.year_max
        ):
            raise FilterValidationError("year_min cannot be greater than year_max")


class CatalogSort(str, Enum):
    """Sort orders offered by the car grid."""

    DEFAULT = "default"
    PRICE_ASC = "price-asc"
    PRICE_DESC = "price-desc"
    YEAR_DESC = "year-desc"
    YEAR_ASC = "year-asc"
    MILEAGE_ASC = "mileage-asc"

    def apply(self, cars: Iterable[Car]) -> list[Car]:
        """Return ``cars`` in this order. Sorting is stable: ties keep store order."""
        if self is CatalogSort.DEFAULT:
            return list(cars)

        key, reverse = _SORT_KEYS[self]
        return sorted(cars, key=key, reverse=reverse)


_SORT_KEYS: dict[CatalogSort, tuple[Callable[[Car], Decimal | int], bool]] = {
    CatalogSort.PRICE_ASC: (lambda car: car.price, False),
    CatalogSort.PRICE_DESC: (lambda car: car.price, True),
    CatalogSort.YEAR_DESC: (lambda car: car.year, True),
    CatalogSort.YEAR_ASC: (lambda car: car.year, False),
    CatalogSort.MILEAGE_ASC: (lambda car: car.mileage, False),
}


@dataclass(frozen=True, slots=True)
class Paging:
    offset: int = 0
    limit: int = 12

    def validate(self) -> None:
        """
        Validate paging parameters.

        Raises:
            PagingValidationError: If paging parameters are invalid
        """
        if self.offset < 0:
            raise PagingValidationError("offset must be >= 0")
        if self.limit <= 0:
            raise PagingValidationError("limit must be > 0")
        if self.limit > MAX_PAGE_LIMIT:
            raise PagingValidationError(f"limit must be <= {MAX_PAGE_LIMIT}")

    def slice(self, cars: list[Car]) -> list[Car]:
        return cars[self.offset : self.offset + self.limit]

    def total_pages(self, total: int) -> int:
        """Number of pages of ``limit`` items needed to show ``total`` items."""
        return -(-total // self.limit)
