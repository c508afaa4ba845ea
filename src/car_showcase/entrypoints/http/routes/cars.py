from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response, status

from car_showcase.entrypoints.http.dependencies import (
    get_add_car_use_case,
    get_delete_car_use_case,
    get_get_car_by_id_use_case,
    get_page_size,
    get_resolve_car_image_use_case,
    get_search_catalog_use_case,
    get_update_car_use_case,
)
from car_showcase.entrypoints.http.dtos.car import CarWriteDTO
from car_showcase.entrypoints.http.dtos.car_image import CarImageResponseDTO
from car_showcase.entrypoints.http.dtos.catalog_search import (
    CarResponseDTO,
    CarsSearchQueryDTO,
    CatalogSearchResponseDTO,
)
from car_showcase.entrypoints.http.error_responses import ErrorResponse
from car_showcase.entrypoints.http.mappers.car_image_mapper import CarImageMapper
from car_showcase.entrypoints.http.mappers.car_mapper import CarMapper
from car_showcase.entrypoints.http.mappers.catalog_search_mapper import CatalogSearchMapper
from car_showcase.use_cases.add_car import AddCar, AddCarRequest
from car_showcase.use_cases.delete_car import DeleteCar, DeleteCarRequest
from car_showcase.use_cases.get_car_by_id import GetCarById, GetCarByIdRequest
from car_showcase.use_cases.resolve_car_image import (
    ResolveCarImage,
    ResolveCarImageRequest,
)
from car_showcase.use_cases.search_car_catalog import SearchCarCatalog
from car_showcase.use_cases.update_car import UpdateCar, UpdateCarRequest


router = APIRouter(tags=["Cars"])

_NOT_FOUND = {404: {"model": ErrorResponse, "description": "Car not found"}}
_INVALID = {422: {"model": ErrorResponse, "description": "Validation error"}}


@router.get(
    "/cars",
    response_model=CatalogSearchResponseDTO,
    summary="Search car catalog",
    description="""
    Search available cars with optional filters, sorting and pagination.

    ## Filters
    - All filters use AND semantics
    - Make/model: case-insensitive substring match
    - Year: inclusive range; price: inclusive maximum

    ## Sorting
    - `default` (catalog order), `price-asc`, `price-desc`, `year-desc`,
      `year-asc`, `mileage-asc`

    ## Example
    ```
    GET /v1/cars?make=toy&price_max=30000.00&sort=price-asc&limit=6
    ```
    """,
    responses=_INVALID,
)
async def search_cars(
    query: Annotated[CarsSearchQueryDTO, Query()],
    use_case: SearchCarCatalog = Depends(get_search_catalog_use_case),
    page_size: int = Depends(get_page_size),
) -> CatalogSearchResponseDTO:
    """Search cars endpoint following parse → execute → map → return pattern."""
    request = CatalogSearchMapper.to_domain_request(query, default_limit=page_size)

    result = await use_case.execute(request)

    return CatalogSearchMapper.to_response(result=result, paging=request.paging)


@router.get(
    "/cars/{car_id}",
    response_model=CarResponseDTO,
    summary="Get car details",
    description="Returns a car by id, including sold cars (is_available=false).",
    responses={**_NOT_FOUND, **_INVALID},
)
async def get_car(
    car_id: int,
    use_case: GetCarById = Depends(get_get_car_by_id_use_case),
) -> CarResponseDTO:
    result = await use_case.execute(GetCarByIdRequest(car_id=car_id))

    return CarMapper.to_response(result.car)


@router.post(
    "/cars",
    response_model=CarResponseDTO,
    status_code=status.HTTP_201_CREATED,
    summary="List a new car",
    responses=_INVALID,
)
async def add_car(
    body: CarWriteDTO,
    use_case: AddCar = Depends(get_add_car_use_case),
) -> CarResponseDTO:
    result = await use_case.execute(AddCarRequest(car=CarMapper.to_domain(body)))

    return CarMapper.to_response(result.car)


@router.put(
    "/cars/{car_id}",
    response_model=CarResponseDTO,
    summary="Replace a car",
    description="Full replacement: fields omitted from the body reset to their defaults.",
    responses={**_NOT_FOUND, **_INVALID},
)
async def update_car(
    car_id: int,
    body: CarWriteDTO,
    use_case: UpdateCar = Depends(get_update_car_use_case),
) -> CarResponseDTO:
    result = await use_case.execute(UpdateCarRequest(car=CarMapper.to_domain(body, car_id=car_id)))

    return CarMapper.to_response(result.car)


@router.delete(
    "/cars/{car_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Mark a car as sold",
    description="Soft delete: the car leaves listings but stays retrievable by id.",
    responses={**_NOT_FOUND, **_INVALID},
)
async def delete_car(
    car_id: int,
    use_case: DeleteCar = Depends(get_delete_car_use_case),
) -> Response:
    await use_case.execute(DeleteCarRequest(car_id=car_id))

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/cars/{car_id}/image",
    response_model=CarImageResponseDTO,
    summary="Resolve a car's display image",
    description="""
    Returns the image URL to try on a given load attempt.

    Clients start at `attempt=0` and increment it each time the image fails
    to load. Attempt 3 and above return an inline SVG that always renders.
    """,
    responses={**_NOT_FOUND, **_INVALID},
)
async def get_car_image(
    car_id: int,
    attempt: int = Query(default=0, ge=0, description="Failed loads so far"),
    use_case: ResolveCarImage = Depends(get_resolve_car_image_use_case),
) -> CarImageResponseDTO:
    result = await use_case.execute(ResolveCarImageRequest(car_id=car_id, attempt=attempt))

    return CarImageMapper.to_response(result, attempt=attempt)
