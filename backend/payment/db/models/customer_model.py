# backend/payment/db/models/customer_model.py
"""
Se encarga de definir el modelo de cliente para la aplicación.
"""

from sqlalchemy import Boolean, Column, String
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID
from sqlalchemy.orm import relationship

from payment.db.database import Base

class Customer(Base):
    __tablename__ = "customers"

    # id y created_at los asigna el CRUD en el primer guardado
    id = Column(UUID(as_uuid=True), primary_key=True, index=True)
    name = Column(String(255), index=True)
    email = Column(String(255), index=True)
    phone_number = Column(String(50))
    created_at = Column(TIMESTAMP(timezone=True), nullable=False)
    status = Column(Boolean, nullable=False, default=True)

    # Arista de propiedad: el cliente es dueño de sus pedidos
    orders = relationship("Order", back_populates="customer", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Customer(id={self.id}, email='{self.email}')>"
