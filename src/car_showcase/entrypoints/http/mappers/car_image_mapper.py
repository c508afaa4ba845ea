from __future__ import annotations

from car_showcase.entrypoints.http.dtos.car_image import CarImageResponseDTO
from car_showcase.use_cases.resolve_car_image import ResolveCarImageResponse


class CarImageMapper:
    @staticmethod
    def to_response(result: ResolveCarImageResponse, attempt: int) -> CarImageResponseDTO:
        return CarImageResponseDTO(
            car_id=result.car_id,
            attempt=attempt,
            strategy=result.strategy.name.lower(),
            url=result.url,
            is_final=result.is_final,
        )
