"""Product Routes — /api/products CRUD plus listing by category.

Invariants:
    - Reads return ProductDetail (embedded category); writes return ProductRow
    - /category/{category_id} has two segments, so it never collides with /{product_id}
"""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from store_api.infrastructure.database import get_db
from store_api.schemas.product import ProductDetail, ProductPayload, ProductRow
from store_api.services.handle_products import ProductHandlers

router = APIRouter(prefix="/api/products", tags=["products"])


@router.get("", response_model=list[ProductDetail])
async def list_products(db: AsyncSession = Depends(get_db)):
    return await ProductHandlers(db).list_products()


@router.get("/category/{category_id}", response_model=list[ProductDetail])
async def list_products_by_category(
    category_id: str, db: AsyncSession = Depends(get_db),
):
    return await ProductHandlers(db).list_by_category(category_id)


@router.get("/{product_id}", response_model=ProductDetail)
async def get_product(product_id: str, db: AsyncSession = Depends(get_db)):
    return await ProductHandlers(db).get_product(product_id)


@router.post("", response_model=ProductRow, status_code=status.HTTP_201_CREATED)
async def create_product(
    body: ProductPayload | None = None, db: AsyncSession = Depends(get_db),
):
    return await ProductHandlers(db).create_product(body or ProductPayload())


@router.put("/{product_id}", response_model=ProductRow)
async def update_product(
    product_id: str,
    body: ProductPayload | None = None,
    db: AsyncSession = Depends(get_db),
):
    return await ProductHandlers(db).update_product(
        product_id, body or ProductPayload(),
    )


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(product_id: str, db: AsyncSession = Depends(get_db)):
    await ProductHandlers(db).delete_product(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
