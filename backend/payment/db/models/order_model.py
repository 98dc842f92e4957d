# backend/payment/db/models/order_model.py
"""
Este archivo contiene el modelo de pedido para la aplicación.
"""

from sqlalchemy import CheckConstraint, Column, ForeignKey, Numeric, Text
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID
from sqlalchemy.orm import relationship

from payment.db.database import Base

class Order(Base):
    __tablename__ = "orders"

    id = Column(UUID(as_uuid=True), primary_key=True, index=True)
    description = Column(Text)
    amount = Column(Numeric(10, 2), nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), nullable=False)
    # Un pedido sin cliente es inválido
    customer_id = Column(UUID(as_uuid=True), ForeignKey("customers.id"), nullable=False, index=True)

    # Referencia inversa de navegación: no propaga altas hacia el cliente
    customer = relationship("Customer", back_populates="orders", cascade="merge")
    products = relationship("Product", back_populates="order", cascade="all, delete-orphan")

    __table_args__ = (
        CheckConstraint("amount >= 0", name="ck_orders_amount_non_negative"),
    )

    def __repr__(self):
        return f"<Order(id={self.id}, customer_id={self.customer_id}, amount={self.amount})>"
