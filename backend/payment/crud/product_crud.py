# backend/payment/crud/product_crud.py
"""
Este archivo contiene la pasarela de persistencia para el modelo Product.
"""

from uuid import UUID

from sqlalchemy.orm import selectinload

from payment.crud.base_crud import CRUDBase
from payment.db.models import Order, Product


class ProductCRUD(CRUDBase[Product, UUID]):
    def __init__(self):
        # Pedido propietario (opcional) y su cliente, para la referencia inversa
        super().__init__(
            Product,
            load_options=(selectinload(Product.order).selectinload(Order.customer),),
        )


product_crud = ProductCRUD()
