# backend/payment/schemas/payment_schema.py
"""
Esquemas Pydantic de transferencia para Customer, Order y Product.

Los tres DTOs se referencian entre sí (cliente -> pedidos -> productos y
las referencias inversas), por eso viven en el mismo módulo.

Los campos viajan en camelCase (`phoneNumber`, `stockQuantity`, ...),
pero también se aceptan en snake_case.

Estos esquemas son deliberadamente permisivos: la validación de dominio
de un pedido (cliente obligatorio, importes no negativos, descuento 0-100)
la hace OrderService para que el error sea un InvalidOrder y no un 422.
"""

from datetime import datetime
from decimal import Decimal
from typing import Annotated, List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field, PlainSerializer
from pydantic.alias_generators import to_camel

# Importe monetario: Decimal como la columna NUMERIC(10,2), número en el JSON.
# NaN/infinito se aceptan aquí para que OrderService los rechace como InvalidOrder.
Money = Annotated[
    Decimal,
    Field(allow_inf_nan=True),
    PlainSerializer(float, return_type=float, when_used="json"),
]


class TransferModel(BaseModel):
    """Configuración común de los esquemas de transferencia."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ========================================
# CLIENTES
# ========================================

class CustomerBase(TransferModel):
    name: Optional[str] = None
    email: Optional[str] = None
    phone_number: Optional[str] = None
    status: Optional[bool] = None


class CustomerDTO(CustomerBase):
    """Cliente con sus pedidos. `orders` siempre está presente, aunque sea vacía."""
    id: Optional[UUID] = None
    created_at: Optional[datetime] = None
    orders: List["OrderDTO"] = Field(default_factory=list)


class CustomerCreate(TransferModel):
    """Esquema para dar de alta un cliente, con validaciones."""
    name: str = Field(..., min_length=1, description="Nombre completo del cliente")
    email: EmailStr = Field(..., description="Email de contacto y notificaciones")
    phone_number: Optional[str] = Field(None, description="Teléfono de contacto")
    status: bool = Field(True, description="Cliente activo")


# ========================================
# PEDIDOS
# ========================================

class OrderDTO(TransferModel):
    """
    Pedido con su cliente y sus productos.

    Para crear un pedido basta con referenciar al cliente por id:
    `{"customer": {"id": "..."}}`.
    """
    id: Optional[UUID] = None
    description: Optional[str] = None
    amount: Optional[Money] = None
    created_at: Optional[datetime] = None
    customer: Optional[CustomerDTO] = None
    products: List["ProductDTO"] = Field(default_factory=list)


# ========================================
# PRODUCTOS
# ========================================

class ProductDTO(TransferModel):
    id: Optional[UUID] = None
    name: Optional[str] = None
    price: Optional[Money] = None
    description: Optional[str] = None
    stock_quantity: Optional[int] = None
    percentage_discount: Optional[int] = None
    created_at: Optional[datetime] = None
    order: Optional[OrderDTO] = None


CustomerDTO.model_rebuild()
OrderDTO.model_rebuild()
ProductDTO.model_rebuild()
