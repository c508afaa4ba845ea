from pydantic import BaseModel, Field


class CarImageResponseDTO(BaseModel):
    car_id: int
    attempt: int = Field(description="Attempt number the URL was resolved for")
    strategy: str = Field(description="photo, dummy_image, placeholder or svg")
    url: str
    is_final: bool = Field(description="True when no further fallback exists")
