from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class CarWriteDTO(BaseModel):
    """Body for creating a listing or fully replacing an existing one."""

    make: str = Field(min_length=1, max_length=50, examples=["Toyota"])
    model: str = Field(min_length=1, max_length=50, examples=["Camry"])
    year: int = Field(ge=1886, examples=[2022])
    price: str = Field(
        description="Price as a decimal string",
        examples=["28500.00"],
        pattern=r"^\d+(\.\d{1,2})?$",
    )
    color: str = ""
    mileage: int = Field(default=0, ge=0)
    fuel_type: str = ""
    transmission: str = ""
    description: str = ""
    image_url: str = ""
    is_available: bool = True
    date_added: datetime | None = Field(
        default=None,
        description="Ignored on create; on replace, omitted means now",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "make": "Toyota",
                "model": "Camry",
                "year": 2022,
                "price": "28500.00",
                "color": "Silver",
                "mileage": 15000,
                "fuel_type": "Gasoline",
                "transmission": "Automatic",
                "description": "Reliable and fuel-efficient sedan.",
            }
        }
    )
