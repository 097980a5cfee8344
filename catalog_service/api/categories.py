"""Category API endpoints."""

from fastapi import APIRouter

from catalog_service.api.dependencies import CatalogServiceDep
from catalog_service.api.schemas import CategoriesResponse, CategorySchema, ErrorResponse

router = APIRouter(prefix="/categories", tags=["Categories"])


@router.get(
    "",
    response_model=CategoriesResponse,
    responses={503: {"model": ErrorResponse}},
    summary="List categories",
    description="Categories present in the catalog with their product counts.",
)
async def list_categories(service: CatalogServiceDep) -> CategoriesResponse:
    """List categories with product counts."""
    categories = await service.get_categories()
    return CategoriesResponse(
        categories=[CategorySchema(**c) for c in categories],
        total_categories=len(categories),
    )
