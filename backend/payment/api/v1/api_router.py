# backend/payment/api/v1/api_router.py
"""
Este archivo contiene el router principal para la API versión 1.

Se encarga de registrar y configurar todos los routers de la versión 1 de la API.
"""

from fastapi import APIRouter

from payment.api.v1.endpoints import customers, orders, products

api_router_v1 = APIRouter()

# ROUTER DE CLIENTES
api_router_v1.include_router(
    customers.router,
    prefix="/customers",            # Prefijo: /api/v1/customers
    tags=["Customers"]
)

# ROUTER DE PEDIDOS
# La creación de un pedido publica la solicitud de factura
api_router_v1.include_router(
    orders.router,
    prefix="/orders",
    tags=["Orders"]
)

# ROUTER DE PRODUCTOS
api_router_v1.include_router(
    products.router,
    prefix="/products",
    tags=["Products"]
)
