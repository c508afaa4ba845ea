from fastapi import APIRouter, Depends

from car_showcase.entrypoints.http.dependencies import (
    get_list_makes_use_case,
    get_list_models_use_case,
)
from car_showcase.entrypoints.http.dtos.catalog_facets import (
    MakesResponseDTO,
    ModelsResponseDTO,
)
from car_showcase.use_cases.list_makes import ListMakes, ListModels


router = APIRouter(tags=["Makes"])


@router.get(
    "/makes",
    response_model=MakesResponseDTO,
    summary="List makes",
    description="Distinct makes across the catalog (sold cars included), sorted.",
)
async def list_makes(use_case: ListMakes = Depends(get_list_makes_use_case)) -> MakesResponseDTO:
    return MakesResponseDTO(makes=await use_case.execute())


@router.get(
    "/makes/{make}/models",
    response_model=ModelsResponseDTO,
    summary="List models of a make",
    description="Distinct models for the make (case-insensitive); empty for unknown makes.",
)
async def list_models(
    make: str,
    use_case: ListModels = Depends(get_list_models_use_case),
) -> ModelsResponseDTO:
    return ModelsResponseDTO(make=make, models=await use_case.execute(make))
