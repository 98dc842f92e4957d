# backend/payment/services/product_service.py
"""
Servicio de consulta de productos.

Los productos solo se crean a través de un pedido (OrderService); aquí
únicamente se consultan.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from payment import mappers
from payment.core.exceptions import ProductNotFound
from payment.core.pagination import PageParams
from payment.crud.base_crud import CRUDBase
from payment.schemas.page_schema import Page
from payment.schemas.payment_schema import ProductDTO
from payment.services.identifiers import parse_uuid


class ProductService:

    def __init__(self, product_gateway: CRUDBase):
        self.product_gateway = product_gateway

    async def get_all_products(self, db: AsyncSession, params: PageParams) -> Page[ProductDTO]:
        products, total = await self.product_gateway.find_page(db, params.page, params.size)
        return Page[ProductDTO](items=mappers.products_to_dtos(products), page=params.page, size=params.size, total=total)

    async def get_product_by_id(self, db: AsyncSession, id: str) -> ProductDTO:
        product_id = parse_uuid(id, "product")
        product = await self.product_gateway.find_by_id(db, product_id)
        if product is None:
            raise ProductNotFound(product_id)
        return mappers.product_to_dto(product)
