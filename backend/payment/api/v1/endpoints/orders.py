# backend/payment/api/v1/endpoints/orders.py
"""
Endpoints REST para pedidos.
"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from payment.api import deps
from payment.core.pagination import PageParams
from payment.schemas.page_schema import Page
from payment.schemas.payment_schema import OrderDTO
from payment.services.order_service import OrderService

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("", response_model=OrderDTO, status_code=status.HTTP_201_CREATED)
async def create_order(
    order_in: OrderDTO,
    db: AsyncSession = Depends(deps.get_db),
    order_service: OrderService = Depends(deps.get_order_service),
) -> OrderDTO:
    """
    Crea un pedido con sus productos y solicita su factura.

    El cuerpo referencia al cliente por id: `{"customer": {"id": "..."}}`.
    Un fallo al notificar la factura no afecta a la respuesta.
    """
    logger.info(f"🆕 PEDIDO: Creando pedido con {len(order_in.products)} producto(s)")
    return await order_service.create_order(db, order_in)


@router.get("", response_model=Page[OrderDTO])
async def read_orders(
    db: AsyncSession = Depends(deps.get_db),
    params: PageParams = Depends(deps.get_page_params),
    order_service: OrderService = Depends(deps.get_order_service),
) -> Page[OrderDTO]:
    """Obtiene una lista paginada de pedidos."""
    return await order_service.get_all_orders(db, params)


@router.get("/{id}", response_model=OrderDTO)
async def read_order(
    id: str,
    db: AsyncSession = Depends(deps.get_db),
    order_service: OrderService = Depends(deps.get_order_service),
) -> OrderDTO:
    """Obtiene un pedido por su UUID."""
    return await order_service.get_order_by_id(db, id)
