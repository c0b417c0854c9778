"""Category Routes — /api/categories CRUD.

Invariants:
    - POST -> 201 + created row; PUT -> 200 + updated row; DELETE -> 204, empty body
    - A missing body is treated as an empty object, so the missing-field message applies
"""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from store_api.infrastructure.database import get_db
from store_api.schemas.category import CategoryPayload, CategoryResponse
from store_api.services.handle_categories import CategoryHandlers

router = APIRouter(prefix="/api/categories", tags=["categories"])


@router.get("", response_model=list[CategoryResponse])
async def list_categories(db: AsyncSession = Depends(get_db)):
    return await CategoryHandlers(db).list_categories()


@router.get("/{category_id}", response_model=CategoryResponse)
async def get_category(category_id: str, db: AsyncSession = Depends(get_db)):
    return await CategoryHandlers(db).get_category(category_id)


@router.post(
    "", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED,
)
async def create_category(
    body: CategoryPayload | None = None, db: AsyncSession = Depends(get_db),
):
    return await CategoryHandlers(db).create_category(body or CategoryPayload())


@router.put("/{category_id}", response_model=CategoryResponse)
async def update_category(
    category_id: str,
    body: CategoryPayload | None = None,
    db: AsyncSession = Depends(get_db),
):
    return await CategoryHandlers(db).update_category(
        category_id, body or CategoryPayload(),
    )


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_category(category_id: str, db: AsyncSession = Depends(get_db)):
    await CategoryHandlers(db).delete_category(category_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
