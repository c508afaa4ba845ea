from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from car_showcase.domain.car import Car
from car_showcase.entrypoints.http.dtos.car import CarWriteDTO
from car_showcase.entrypoints.http.dtos.catalog_search import CarResponseDTO


class CarMapper:
    """Maps between REST DTOs and the Car domain entity."""

    @staticmethod
    def to_domain(dto: CarWriteDTO, car_id: int = 0) -> Car:
        """
        Converts a write DTO into a Car, handling Decimal conversion.

        Args:
            dto: Request body
            car_id: Target id for a replacement; 0 lets the store assign one

        Returns:
            Car: Domain entity with a Decimal price
        """
        return Car(
            id=car_id,
            make=dto.make,
            model=dto.model,
            year=dto.year,
            price=Decimal(dto.price),  # str → Decimal at boundary
            color=dto.color,
            mileage=dto.mileage,
            fuel_type=dto.fuel_type,
            transmission=dto.transmission,
            description=dto.description,
            image_url=dto.image_url,
            is_available=dto.is_available,
            date_added=dto.date_added or datetime.now(),
        )

    @staticmethod
    def to_response(car: Car) -> CarResponseDTO:
        """
        Converts a Car into its REST representation.

        Handles Decimal → str conversion at the boundary.
        """
        return CarResponseDTO(
            id=car.id,
            make=car.make,
            model=car.model,
            year=car.year,
            price=str(car.price),
            color=car.color,
            mileage=car.mileage,
            fuel_type=car.fuel_type,
            transmission=car.transmission,
            description=car.description,
            image_url=car.image_url,
            is_available=car.is_available,
            date_added=car.date_added,
        )
