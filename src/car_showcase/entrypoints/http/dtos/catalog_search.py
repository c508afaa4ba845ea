from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from car_showcase.domain.car import MAX_PAGE_LIMIT, CatalogSort


class CarResponseDTO(BaseModel):
    id: int
    make: str
    model: str
    year: int
    price: str
    color: str
    mileage: int
    fuel_type: str
    transmission: str
    description: str
    image_url: str
    is_available: bool
    date_added: datetime


class CarsSearchQueryDTO(BaseModel):
    """Query parameters for searching cars in the catalog."""

    make: str | None = Field(
        default=None,
        description="Filter by make (case-insensitive substring match)",
        examples=["Toyota"],
    )
    model: str | None = Field(
        default=None,
        description="Filter by model (case-insensitive substring match)",
        examples=["Camry"],
    )
    year_min: int | None = Field(
        default=None,
        description="Minimum year (inclusive)",
        examples=[2018],
        ge=1886,
    )
    year_max: int | None = Field(
        default=None,
        description="Maximum year (inclusive)",
        examples=[2023],
        ge=1886,
    )
    price_max: str | None = Field(
        default=None,
        description="Maximum price (inclusive, decimal as string)",
        examples=["35000.00"],
        pattern=r"^\d+(\.\d{1,2})?$",
    )
    sort: CatalogSort = Field(
        default=CatalogSort.DEFAULT,
        description="Sort order; 'default' keeps catalog order",
        examples=["price-asc"],
    )
    offset: int = Field(
        default=0,
        description="Number of results to skip",
        examples=[0],
        ge=0,
    )
    limit: int | None = Field(
        default=None,
        description="Maximum number of results to return (defaults to the configured page size)",
        examples=[12],
        ge=1,
        le=MAX_PAGE_LIMIT,
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "make": "Toyota",
                "model": "Camry",
                "year_min": 2018,
                "year_max": 2023,
                "price_max": "35000.00",
                "sort": "price-asc",
                "offset": 0,
                "limit": 12,
            }
        }
    )


class CatalogSearchResponseDTO(BaseModel):
    cars: list[CarResponseDTO]
    total: int
    offset: int
    limit: int
    total_pages: int
