# backend/payment/api/exception_handlers.py
"""
Traducción de las excepciones de dominio a respuestas HTTP.

| Excepción          | Estado |
|--------------------|--------|
| NotFound           | 404    |
| InvalidUuid        | 400    |
| InvalidOrder       | 400    |
| PersistenceFailure | 500    |
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from payment.core.exceptions import InvalidOrder, InvalidUuid, NotFound, PersistenceFailure

logger = logging.getLogger(__name__)


async def not_found_handler(request: Request, exc: NotFound) -> JSONResponse:
    logger.warning(f"⚠️ {exc.entity} no encontrado: {exc.identifier}")
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"detail": str(exc)},
    )


async def invalid_uuid_handler(request: Request, exc: InvalidUuid) -> JSONResponse:
    logger.warning(f"⚠️ UUID inválido en {request.url.path}: {exc.value!r}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": str(exc)},
    )


async def invalid_order_handler(request: Request, exc: InvalidOrder) -> JSONResponse:
    logger.warning(f"⚠️ Pedido rechazado: {exc.problems}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Invalid order", "problems": exc.problems},
    )


async def persistence_failure_handler(request: Request, exc: PersistenceFailure) -> JSONResponse:
    logger.error(f"❌ Fallo de persistencia en {request.method} {request.url.path} ({exc.reason}): {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Registra los handlers de las excepciones de dominio en la aplicación."""
    app.add_exception_handler(NotFound, not_found_handler)
    app.add_exception_handler(InvalidUuid, invalid_uuid_handler)
    app.add_exception_handler(InvalidOrder, invalid_order_handler)
    app.add_exception_handler(PersistenceFailure, persistence_failure_handler)
