"""
Fixtures compartidos para los tests del servicio de pagos.

Las pasarelas en memoria sustituyen al CRUD de SQLAlchemy: asignan ids
deterministas, registran cada invocación y reproducen el fallo de
integridad de un pedido con cliente inexistente.
"""

import uuid
from datetime import datetime, timezone
from typing import List

import pytest
from fastapi.testclient import TestClient

from payment.api import deps
from payment.core.exceptions import PersistenceFailure
from payment.db.models import Customer, Order, Product
from payment.events.bill_events import BillRequested
from payment.events.dispatcher import EventDispatcher
from payment.main import create_app
from payment.services.customer_service import CustomerService
from payment.services.order_service import OrderService
from payment.services.product_service import ProductService

FIXED_NOW = datetime(2025, 1, 15, 10, 30, tzinfo=timezone.utc)


# ============================================================================
# PASARELAS EN MEMORIA
# ============================================================================


class InMemoryGateway:
    """Pasarela de persistencia en memoria con el mismo contrato que CRUDBase."""

    def __init__(self, prefix: int, owned_children=()):
        self.prefix = prefix
        self.owned_children = tuple(owned_children)
        self.rows = {}
        self.calls: List[tuple] = []
        self.fail_with = None
        self._counter = 0

    def next_id(self) -> uuid.UUID:
        self._counter += 1
        return uuid.UUID(int=(self.prefix << 64) + self._counter)

    def _stamp(self, entity) -> None:
        if entity.id is None:
            entity.id = self.next_id()
        if entity.created_at is None:
            entity.created_at = FIXED_NOW

    def _before_store(self, entity) -> None:
        pass

    async def save(self, db, entity):
        self.calls.append(("save", entity))
        if self.fail_with is not None:
            raise self.fail_with
        self._stamp(entity)
        for attr in self.owned_children:
            for child in getattr(entity, attr):
                self._stamp(child)
        self._before_store(entity)
        self.rows[entity.id] = entity
        return entity

    async def find_by_id(self, db, id):
        self.calls.append(("find_by_id", id))
        return self.rows.get(id)

    async def find_page(self, db, page_number, page_size):
        self.calls.append(("find_page", page_number, page_size))
        rows = list(self.rows.values())
        start = (page_number - 1) * page_size
        return rows[start:start + page_size], len(rows)


class InMemoryOrderGateway(InMemoryGateway):
    """Enlaza el pedido con su cliente por clave, como hace la clave foránea."""

    def __init__(self, customers: InMemoryGateway, products: InMemoryGateway):
        super().__init__(prefix=2, owned_children=("products",))
        self.customers = customers
        self.products = products

    def _before_store(self, order: Order) -> None:
        customer = self.customers.rows.get(order.customer_id)
        if customer is None:
            raise PersistenceFailure("Integrity violation while saving Order", reason=PersistenceFailure.INTEGRITY)
        order.customer = customer
        for product in order.products:
            product.order_id = order.id
            self.products.rows[product.id] = product


# ============================================================================
# FIXTURES DE PERSISTENCIA
# ============================================================================


@pytest.fixture
def customer_gateway():
    return InMemoryGateway(prefix=1)


@pytest.fixture
def product_gateway():
    return InMemoryGateway(prefix=3)


@pytest.fixture
def order_gateway(customer_gateway, product_gateway):
    return InMemoryOrderGateway(customer_gateway, product_gateway)


@pytest.fixture
def existing_customer(customer_gateway) -> Customer:
    """Cliente C1 ya persistido."""
    customer = Customer(
        id=customer_gateway.next_id(),
        name="Ada Lovelace",
        email="ada@example.com",
        phone_number="+34 600 000 000",
        status=True,
        created_at=FIXED_NOW,
    )
    customer_gateway.rows[customer.id] = customer
    return customer


# ============================================================================
# FIXTURES DE EVENTOS Y SERVICIOS
# ============================================================================


@pytest.fixture
def received_bills() -> List[BillRequested]:
    return []


@pytest.fixture
def dispatcher(received_bills) -> EventDispatcher:
    dispatcher = EventDispatcher()
    dispatcher.register(BillRequested, received_bills.append)
    return dispatcher


@pytest.fixture
def order_service(order_gateway, dispatcher) -> OrderService:
    return OrderService(order_gateway, dispatcher)


@pytest.fixture
def customer_service(customer_gateway) -> CustomerService:
    return CustomerService(customer_gateway)


@pytest.fixture
def product_service(product_gateway) -> ProductService:
    return ProductService(product_gateway)


@pytest.fixture
def atlas_order_payload(existing_customer) -> dict:
    return {
        "description": "book",
        "amount": 19.99,
        "customer": {"id": str(existing_customer.id)},
        "products": [
            {"name": "Atlas", "price": 19.99, "stockQuantity": 3, "percentageDiscount": 0},
        ],
    }


# ============================================================================
# CLIENTE HTTP
# ============================================================================


@pytest.fixture
def app(dispatcher, customer_gateway, order_gateway, product_gateway):
    app = create_app(
        dispatcher=dispatcher,
        customer_gateway=customer_gateway,
        order_gateway=order_gateway,
        product_gateway=product_gateway,
    )

    async def override_get_db():
        yield None

    app.dependency_overrides[deps.get_db] = override_get_db
    return app


@pytest.fixture
def client(app) -> TestClient:
    """Cliente sin contexto: no se ejecuta el lifespan ni se toca la base de datos."""
    return TestClient(app)
