# backend/payment/main.py
"""
Punto de entrada principal de la aplicación FastAPI.

Este módulo configura y inicializa la aplicación completa:
- Construcción del dispatcher de eventos y registro de listeners
- Construcción de los servicios con sus pasarelas de persistencia
- Registro de routers de la API con prefijos
- Traducción de errores de dominio a respuestas HTTP
- Ciclo de vida (logging y creación del esquema al arrancar)
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI

from payment.api.exception_handlers import register_exception_handlers
from payment.api.v1.api_router import api_router_v1
from payment.core.config import settings
from payment.core.logging_config import setup_logging
from payment.crud.base_crud import CRUDBase
from payment.crud.customer_crud import customer_crud
from payment.crud.order_crud import order_crud
from payment.crud.product_crud import product_crud
from payment.db.init_db import init_db
from payment.events.billing_listener import register_billing_listeners
from payment.events.dispatcher import EventDispatcher
from payment.services.customer_service import CustomerService
from payment.services.order_service import OrderService
from payment.services.product_service import ProductService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Arranque: logging y, si está activado, creación de tablas."""
    setup_logging()
    if settings.CREATE_TABLES_ON_STARTUP:
        await init_db()
    logger.info(f"✅ {settings.PROJECT_NAME} v{settings.PROJECT_VERSION} iniciado")
    yield


def create_app(
    dispatcher: Optional[EventDispatcher] = None,
    customer_gateway: CRUDBase = customer_crud,
    order_gateway: CRUDBase = order_crud,
    product_gateway: CRUDBase = product_crud,
) -> FastAPI:
    """
    Construye la aplicación.

    El dispatcher se crea una sola vez aquí y se pasa explícitamente a
    OrderService; los listeners se registran antes de atender peticiones.
    """
    app = FastAPI(
        title=settings.PROJECT_NAME,
        openapi_url=f"{settings.API_V1_STR}/openapi.json",
        version=settings.PROJECT_VERSION,
        description="API del servicio de pagos: clientes, pedidos y productos",
        lifespan=lifespan,
    )

    if dispatcher is None:
        dispatcher = EventDispatcher()
        register_billing_listeners(dispatcher)

    app.state.dispatcher = dispatcher
    app.state.customer_service = CustomerService(customer_gateway)
    app.state.order_service = OrderService(order_gateway, dispatcher)
    app.state.product_service = ProductService(product_gateway)

    register_exception_handlers(app)
    app.include_router(api_router_v1, prefix=settings.API_V1_STR)

    @app.get("/", tags=["Root"])
    async def read_root():
        """Mensaje de bienvenida con nombre y versión del servicio."""
        return {"message": f"Bienvenido a {settings.PROJECT_NAME} v{settings.PROJECT_VERSION}"}

    @app.get("/health", tags=["Root"])
    async def health_check():
        """Health check básico para monitoreo."""
        return f"Payment Service is healthy at {datetime.now(timezone.utc).isoformat()}"

    return app


app = create_app()
