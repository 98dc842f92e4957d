# backend/payment/services/order_service.py
"""
Capa de servicios para la creación y consulta de pedidos.

La creación de un pedido sigue siempre la misma secuencia:

1. Validar      -> InvalidOrder si el pedido no es válido (sin tocar la BD)
2. Traducir     -> DTO a grafo de entidades (pedido + productos)
3. Persistir    -> CRUD save(); un PersistenceFailure se propaga sin cambios
4. Notificar    -> BillRequested al dispatcher, solo tras confirmar en BD
5. Responder    -> entidad persistida traducida de vuelta a DTO

Un fallo de los listeners en el paso 4 no deshace el pedido ni cambia la
respuesta: el pedido se considera creado en cuanto se confirma en BD.
El servicio no reintenta nada.
"""

import logging
from decimal import Decimal
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from payment import mappers
from payment.core.exceptions import InvalidOrder, OrderNotFound
from payment.core.pagination import PageParams
from payment.crud.base_crud import CRUDBase
from payment.db.models import Order
from payment.events.bill_events import BillRequested
from payment.events.dispatcher import EventDispatcher
from payment.schemas.page_schema import Page
from payment.schemas.payment_schema import OrderDTO
from payment.services.identifiers import parse_uuid

logger = logging.getLogger(__name__)

# Mayor valor que admite una columna NUMERIC(10,2)
MAX_MONEY = Decimal("99999999.99")


class OrderService:
    """
    Servicio de pedidos.

    Args:
        order_gateway: Pasarela de persistencia de pedidos
        dispatcher: Dispatcher donde se publica BillRequested
    """

    def __init__(self, order_gateway: CRUDBase, dispatcher: EventDispatcher):
        self.order_gateway = order_gateway
        self.dispatcher = dispatcher

    # ========================================
    # CREACIÓN
    # ========================================

    async def create_order(self, db: AsyncSession, order_in: OrderDTO) -> OrderDTO:
        """
        Crea un pedido con sus productos y solicita su factura.

        Raises:
            InvalidOrder: si el pedido no supera la validación de dominio
            PersistenceFailure: si falla el almacenamiento (incluido un
                cliente inexistente, con reason "integrity")
        """
        self.validate_order(order_in)

        order = mappers.order_dto_to_entity(order_in)
        _discard_generated_fields(order)

        persisted = await self.order_gateway.save(db, order)
        logger.info(f"🆕 PEDIDO: Creado pedido con id {persisted.id}")

        failures = self.dispatcher.publish(BillRequested(order=persisted, source=type(self).__name__))
        if failures:
            logger.warning(f"⚠️ PEDIDO: {failures} listener(s) fallaron para el pedido {persisted.id}")
        else:
            logger.info(f"BillRequested publicado para el pedido {persisted.id}")

        return mappers.order_to_dto(persisted)

    @staticmethod
    def validate_order(order_in: OrderDTO) -> None:
        """Comprueba las reglas de dominio y acumula todos los problemas."""
        problems: List[str] = []

        if order_in.customer is None or order_in.customer.id is None:
            problems.append("customer reference is required")
        _check_money(problems, "amount", order_in.amount)

        for index, product in enumerate(order_in.products):
            label = f"products[{index}]"
            _check_money(problems, f"{label}.price", product.price)
            if product.stock_quantity is not None and product.stock_quantity < 0:
                problems.append(f"{label}.stockQuantity must not be negative")
            if product.percentage_discount is not None and not 0 <= product.percentage_discount <= 100:
                problems.append(f"{label}.percentageDiscount must be between 0 and 100")

        if problems:
            raise InvalidOrder(problems)

    # ========================================
    # CONSULTA
    # ========================================

    async def get_order_by_id(self, db: AsyncSession, id: str) -> OrderDTO:
        order_id = parse_uuid(id, "order")
        order = await self.order_gateway.find_by_id(db, order_id)
        if order is None:
            raise OrderNotFound(order_id)
        return mappers.order_to_dto(order)

    async def get_all_orders(self, db: AsyncSession, params: PageParams) -> Page[OrderDTO]:
        orders, total = await self.order_gateway.find_page(db, params.page, params.size)
        return Page[OrderDTO](items=mappers.orders_to_dtos(orders), page=params.page, size=params.size, total=total)


def _check_money(problems: List[str], label: str, value: Optional[Decimal]) -> None:
    # NaN no admite comparaciones ordenadas: primero se descartan los no finitos
    if value is None:
        problems.append(f"{label} is required")
    elif not value.is_finite():
        problems.append(f"{label} must be a finite number")
    elif value < 0:
        problems.append(f"{label} must not be negative")
    elif value > MAX_MONEY:
        problems.append(f"{label} must not exceed {MAX_MONEY}")


def _discard_generated_fields(order: Order) -> None:
    """Los ids y fechas de creación los genera la persistencia, nunca el cliente."""
    order.id = None
    order.created_at = None
    for product in order.products:
        product.id = None
        product.created_at = None
        product.order_id = None
        if product.stock_quantity is None:
            product.stock_quantity = 0
        if product.percentage_discount is None:
            product.percentage_discount = 0
