# backend/payment/crud/customer_crud.py
"""
Este archivo contiene la pasarela de persistencia para el modelo Customer.
"""

from uuid import UUID

from sqlalchemy.orm import selectinload

from payment.crud.base_crud import CRUDBase
from payment.db.models import Customer, Order


class CustomerCRUD(CRUDBase[Customer, UUID]):
    def __init__(self):
        # El cliente se devuelve con sus pedidos y los productos de cada pedido
        super().__init__(
            Customer,
            load_options=(selectinload(Customer.orders).selectinload(Order.products),),
        )


customer_crud = CustomerCRUD()
