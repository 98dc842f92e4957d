# backend/payment/api/v1/endpoints/customers.py
"""
Endpoints REST para clientes.

- GET  /customers       listado paginado (page 1-based, size máximo 100)
- GET  /customers/{id}  cliente por UUID
- POST /customers       alta de cliente
"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from payment.api import deps
from payment.core.pagination import PageParams
from payment.schemas.page_schema import Page
from payment.schemas.payment_schema import CustomerCreate, CustomerDTO
from payment.services.customer_service import CustomerService

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("", response_model=Page[CustomerDTO])
async def read_customers(
    db: AsyncSession = Depends(deps.get_db),
    params: PageParams = Depends(deps.get_page_params),
    customer_service: CustomerService = Depends(deps.get_customer_service),
) -> Page[CustomerDTO]:
    """Obtiene una lista paginada de clientes."""
    logger.debug(f"📋 CLIENTES: Listando página {params.page} (size={params.size})")
    return await customer_service.get_all_customers(db, params)


@router.get("/{id}", response_model=CustomerDTO)
async def read_customer(
    id: str,
    db: AsyncSession = Depends(deps.get_db),
    customer_service: CustomerService = Depends(deps.get_customer_service),
) -> CustomerDTO:
    """Obtiene un cliente por su UUID."""
    logger.debug(f"🔍 CLIENTE: Buscando cliente '{id}'")
    return await customer_service.get_customer_by_id(db, id)


@router.post("", response_model=CustomerDTO, status_code=status.HTTP_201_CREATED)
async def create_customer(
    customer_in: CustomerCreate,
    db: AsyncSession = Depends(deps.get_db),
    customer_service: CustomerService = Depends(deps.get_customer_service),
) -> CustomerDTO:
    """Da de alta un nuevo cliente."""
    return await customer_service.create_customer(db, customer_in)
