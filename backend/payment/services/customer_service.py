# backend/payment/services/customer_service.py
"""
Servicio para operaciones de negocio relacionadas con clientes.

Hace de intermediario entre los endpoints y la pasarela de persistencia:
convierte identificadores, decide cuándo un resultado vacío es un
"no encontrado" y traduce entidades a DTOs.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from payment import mappers
from payment.core.exceptions import CustomerNotFound
from payment.core.pagination import PageParams
from payment.crud.base_crud import CRUDBase
from payment.db.models import Customer
from payment.schemas.page_schema import Page
from payment.schemas.payment_schema import CustomerCreate, CustomerDTO
from payment.services.identifiers import parse_uuid

logger = logging.getLogger(__name__)


class CustomerService:
    """Servicio de clientes sobre una pasarela de persistencia de Customer."""

    def __init__(self, customer_gateway: CRUDBase):
        self.customer_gateway = customer_gateway

    async def get_all_customers(self, db: AsyncSession, params: PageParams) -> Page[CustomerDTO]:
        """
        Obtiene una página de clientes.

        `params` ya viene acotado desde la capa HTTP; una página vacía
        no es un error.
        """
        customers, total = await self.customer_gateway.find_page(db, params.page, params.size)
        return Page[CustomerDTO](
            items=mappers.customers_to_dtos(customers),
            page=params.page,
            size=params.size,
            total=total,
        )

    async def get_customer_by_id(self, db: AsyncSession, id: str) -> CustomerDTO:
        """
        Obtiene un cliente por su UUID en texto.

        Raises:
            InvalidUuid: si `id` no es un UUID válido
            CustomerNotFound: si no existe un cliente con ese id
        """
        customer_id = parse_uuid(id, "customer")
        customer = await self.customer_gateway.find_by_id(db, customer_id)
        if customer is None:
            raise CustomerNotFound(customer_id)
        return mappers.customer_to_dto(customer)

    async def create_customer(self, db: AsyncSession, customer_in: CustomerCreate) -> CustomerDTO:
        """Da de alta un cliente; id y fecha de creación los asigna la persistencia."""
        customer = Customer(
            name=customer_in.name.strip(),
            email=str(customer_in.email),
            phone_number=customer_in.phone_number,
            status=customer_in.status,
        )
        persisted = await self.customer_gateway.save(db, customer)
        logger.info(f"🆕 CLIENTE: Creado cliente con id {persisted.id}")
        return mappers.customer_to_dto(persisted)
