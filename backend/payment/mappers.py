# backend/payment/mappers.py
"""
Conversión entre entidades ORM y esquemas de transferencia.

Funciones puras: no abren sesiones ni hacen consultas, solo copian campos.
Quien llama es responsable de que las relaciones que se van a leer estén
cargadas (el CRUD las precarga con selectinload).

Regla para no expandir el grafo de forma cíclica:
- el cliente anidado en un pedido sale con `orders=[]`;
- los productos anidados en un pedido salen con `order=None`;
- el pedido anidado en un producto sale con `products=[]`;
- los pedidos de un cliente salen sin el cliente anidado.

En sentido contrario, el pedido se enlaza con su cliente por clave
(`customer_id`); nunca se construye una segunda entidad Customer.
"""

from typing import Iterable, List, Optional

from payment.db.models import Customer, Order, Product
from payment.schemas.payment_schema import CustomerDTO, OrderDTO, ProductDTO


# ========================================
# ENTIDAD -> DTO
# ========================================

def _customer_summary(customer: Customer) -> CustomerDTO:
    """Cliente sin expandir sus pedidos."""
    return CustomerDTO(
        id=customer.id,
        name=customer.name,
        email=customer.email,
        phone_number=customer.phone_number,
        status=customer.status,
        created_at=customer.created_at,
        orders=[],
    )


def _product_fields(product: Product) -> dict:
    return dict(
        id=product.id,
        name=product.name,
        price=product.price,
        description=product.description,
        stock_quantity=product.stock_quantity,
        percentage_discount=product.percentage_discount,
        created_at=product.created_at,
    )


def _order_fields(order: Order) -> dict:
    return dict(
        id=order.id,
        description=order.description,
        amount=order.amount,
        created_at=order.created_at,
    )


def _order_customer(order: Order) -> Optional[CustomerDTO]:
    if order.customer is not None:
        return _customer_summary(order.customer)
    if order.customer_id is not None:
        return CustomerDTO(id=order.customer_id)
    return None


def _order_to_dto(order: Order, include_customer: bool = True) -> OrderDTO:
    return OrderDTO(
        **_order_fields(order),
        customer=_order_customer(order) if include_customer else None,
        products=[ProductDTO(**_product_fields(p)) for p in order.products],
    )


def customer_to_dto(customer: Customer) -> CustomerDTO:
    dto = _customer_summary(customer)
    dto.orders = [_order_to_dto(o, include_customer=False) for o in customer.orders]
    return dto


def order_to_dto(order: Order) -> OrderDTO:
    return _order_to_dto(order)


def product_to_dto(product: Product) -> ProductDTO:
    order_dto = None
    if product.order is not None:
        order_dto = OrderDTO(**_order_fields(product.order), customer=_order_customer(product.order), products=[])
    elif product.order_id is not None:
        order_dto = OrderDTO(id=product.order_id)
    return ProductDTO(**_product_fields(product), order=order_dto)


def customers_to_dtos(customers: Iterable[Customer]) -> List[CustomerDTO]:
    return [customer_to_dto(c) for c in customers]


def orders_to_dtos(orders: Iterable[Order]) -> List[OrderDTO]:
    return [order_to_dto(o) for o in orders]


def products_to_dtos(products: Iterable[Product]) -> List[ProductDTO]:
    return [product_to_dto(p) for p in products]


# ========================================
# DTO -> ENTIDAD
# ========================================

def product_dto_to_entity(dto: ProductDTO) -> Product:
    return Product(
        id=dto.id,
        name=dto.name,
        price=dto.price,
        description=dto.description,
        stock_quantity=dto.stock_quantity,
        percentage_discount=dto.percentage_discount,
        created_at=dto.created_at,
        order_id=dto.order.id if dto.order is not None else None,
    )


def order_dto_to_entity(dto: OrderDTO) -> Order:
    order = Order(
        id=dto.id,
        description=dto.description,
        amount=dto.amount,
        created_at=dto.created_at,
        customer_id=dto.customer.id if dto.customer is not None else None,
    )
    for product in product_dtos_to_products(dto.products):
        if product.order_id is None:
            product.order_id = order.id
        order.products.append(product)
    return order


def customer_dto_to_entity(dto: CustomerDTO) -> Customer:
    customer = Customer(
        id=dto.id,
        name=dto.name,
        email=dto.email,
        phone_number=dto.phone_number,
        status=dto.status,
        created_at=dto.created_at,
    )
    for order in order_dtos_to_orders(dto.orders):
        if order.customer_id is None:
            order.customer_id = customer.id
        customer.orders.append(order)
    return customer


def order_dtos_to_orders(dtos: Iterable[OrderDTO]) -> List[Order]:
    return [order_dto_to_entity(d) for d in dtos]


def product_dtos_to_products(dtos: Iterable[ProductDTO]) -> List[Product]:
    return [product_dto_to_entity(d) for d in dtos]
