# backend/payment/db/models/product_model.py
"""
Este archivo contiene el modelo de producto para la aplicación.

Un producto puede existir sin pedido asignado (order_id nulo).
"""

from sqlalchemy import CheckConstraint, Column, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID
from sqlalchemy.orm import relationship

from payment.db.database import Base

class Product(Base):
    __tablename__ = "products"

    id = Column(UUID(as_uuid=True), primary_key=True, index=True)
    name = Column(String(255), index=True)
    price = Column(Numeric(10, 2), nullable=False)  # Precisión decimal para precios
    description = Column(Text)
    stock_quantity = Column(Integer, nullable=False, default=0)
    percentage_discount = Column(Integer, nullable=False, default=0)
    created_at = Column(TIMESTAMP(timezone=True), nullable=False)
    order_id = Column(UUID(as_uuid=True), ForeignKey("orders.id"), nullable=True, index=True)

    order = relationship("Order", back_populates="products", cascade="merge")

    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_products_price_non_negative"),
        CheckConstraint("stock_quantity >= 0", name="ck_products_stock_non_negative"),
        CheckConstraint(
            "percentage_discount >= 0 AND percentage_discount <= 100",
            name="ck_products_discount_range",
        ),
    )

    def __repr__(self):
        return f"<Product(id={self.id}, name='{self.name}', order_id={self.order_id})>"
