# backend/payment/api/v1/endpoints/products.py

"""
Endpoints REST de consulta de productos.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from payment.api import deps
from payment.core.pagination import PageParams
from payment.schemas.page_schema import Page
from payment.schemas.payment_schema import ProductDTO
from payment.services.product_service import ProductService

router = APIRouter()


@router.get("", response_model=Page[ProductDTO])
async def read_products(
    db: AsyncSession = Depends(deps.get_db),
    params: PageParams = Depends(deps.get_page_params),
    product_service: ProductService = Depends(deps.get_product_service),
) -> Page[ProductDTO]:
    """Obtiene una lista paginada de productos."""
    return await product_service.get_all_products(db, params)


@router.get("/{id}", response_model=ProductDTO)
async def read_product(
    id: str,
    db: AsyncSession = Depends(deps.get_db),
    product_service: ProductService = Depends(deps.get_product_service),
) -> ProductDTO:
    """Obtiene los detalles de un producto por UUID."""
    return await product_service.get_product_by_id(db, id)
