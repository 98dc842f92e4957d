# Importar todos los modelos para que SQLAlchemy resuelva las relaciones por nombre
from payment.db.models.customer_model import Customer
from payment.db.models.order_model import Order
from payment.db.models.product_model import Product

__all__ = ["Customer", "Order", "Product"]
