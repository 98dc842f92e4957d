# backend/payment/events/bill_events.py
"""
Notificación publicada cuando un pedido persistido debe facturarse.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4

from payment.db.models import Order


@dataclass(frozen=True)
class BillRequested:
    """
    Solicitud de factura para un pedido ya confirmado en base de datos.

    Lleva la entidad Order por referencia, con su id generado. Los
    listeners no deben modificarla.
    """

    order: Order
    source: str = "OrderService"
    event_id: UUID = field(default_factory=uuid4)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def order_id(self) -> UUID:
        return self.order.id
