"""Showcase inventory the in-memory catalog boots with."""

from __future__ import annotations

from decimal import Decimal

from car_showcase.domain.car import Car


def sample_cars() -> list[Car]:
    """Return a fresh copy of the six showcase cars (ids 1-6, all available)."""
    return [
        Car(
            id=1,
            make="Toyota",
            model="Camry",
            year=2022,
            price=Decimal("28500.00"),
            color="Silver",
            mileage=15000,
            fuel_type="Gasoline",
            transmission="Automatic",
            description="Reliable and fuel-efficient sedan with excellent safety ratings.",
            image_url="https://via.placeholder.com/400x300?text=Toyota+Camry",
        ),
        Car(
            id=2,
            make="Honda",
            model="Civic",
            year=2023,
            price=Decimal("24000.00"),
            color="Blue",
            mileage=8000,
            fuel_type="Gasoline",
            transmission="Manual",
            description="Sporty compact car with great handling and modern features.",
            image_url="https://via.placeholder.com/400x300?text=Honda+Civic",
        ),
        Car(
            id=3,
            make="Tesla",
            model="Model 3",
            year=2023,
            price=Decimal("45000.00"),
            color="White",
            mileage=5000,
            fuel_type="Electric",
            transmission="Automatic",
            description="Premium electric sedan with autopilot and cutting-edge technology.",
            image_url="https://via.placeholder.com/400x300?text=Tesla+Model+3",
        ),
        Car(
            id=4,
            make="Ford",
            model="F-150",
            year=2022,
            price=Decimal("35000.00"),
            color="Black",
            mileage=20000,
            fuel_type="Gasoline",
            transmission="Automatic",
            description="America's best-selling truck with impressive towing capacity.",
            image_url="https://via.placeholder.com/400x300?text=Ford+F-150",
        ),
        Car(
            id=5,
            make="BMW",
            model="X5",
            year=2021,
            price=Decimal("55000.00"),
            color="Gray",
            mileage=25000,
            fuel_type="Gasoline",
            transmission="Automatic",
            description="Luxury SUV with premium interior and advanced driver assistance.",
            image_url="https://via.placeholder.com/400x300?text=BMW+X5",
        ),
        Car(
            id=6,
            make="Audi",
            model="A4",
            year=2023,
            price=Decimal("42000.00"),
            color="Red",
            mileage=3000,
            fuel_type="Gasoline",
            transmission="Automatic",
            description="Elegant sedan with quattro all-wheel drive and premium features.",
            image_url="https://via.placeholder.com/400x300?text=Audi+A4",
        ),
    ]
