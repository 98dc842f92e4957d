# backend/payment/crud/order_crud.py
"""
Este archivo contiene la pasarela de persistencia para el modelo Order.

Guardar un pedido guarda también sus productos (relación de propiedad),
pero nunca crea ni modifica al cliente: se enlaza por customer_id. Si el
cliente no existe, la clave foránea falla y save() lanza un
PersistenceFailure con reason "integrity".
"""

from uuid import UUID

from sqlalchemy.orm import selectinload

from payment.crud.base_crud import CRUDBase
from payment.db.models import Order


class OrderCRUD(CRUDBase[Order, UUID]):
    def __init__(self):
        super().__init__(
            Order,
            load_options=(selectinload(Order.customer), selectinload(Order.products)),
            owned_children=("products",),
        )


order_crud = OrderCRUD()
