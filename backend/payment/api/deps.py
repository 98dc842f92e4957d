# backend/payment/api/deps.py
"""
Módulo de dependencias para FastAPI.

Centraliza lo que se inyecta en los endpoints: la sesión de base de datos,
los parámetros de paginación ya acotados y los servicios construidos al
crear la aplicación (ver `payment.main.create_app`).
"""

from typing import AsyncGenerator, Optional

from fastapi import Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from payment.core.pagination import PageParams
from payment.db.database import AsyncSessionLocal
from payment.services.customer_service import CustomerService
from payment.services.order_service import OrderService
from payment.services.product_service import ProductService


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependencia de FastAPI para obtener una sesión de base de datos asíncrona.
    Se asegura de que la sesión se cierre siempre después de la petición.
    """
    async with AsyncSessionLocal() as session:
        yield session


def get_page_params(
    page: Optional[int] = Query(default=None, description="Número de página (1-based)"),
    size: Optional[int] = Query(default=None, description="Tamaño de página, máximo 100"),
) -> PageParams:
    """Aplica los valores por defecto y acota el tamaño antes de llegar al servicio."""
    return PageParams.from_query(page, size)


def get_customer_service(request: Request) -> CustomerService:
    return request.app.state.customer_service


def get_order_service(request: Request) -> OrderService:
    return request.app.state.order_service


def get_product_service(request: Request) -> ProductService:
    return request.app.state.product_service
