# backend/payment/events/billing_listener.py
"""
Listener de facturación.

Por ahora simula el envío de la factura dejando constancia en el log.
Aquí se conectaría un proveedor de facturación real.
"""

import logging

from payment.events.bill_events import BillRequested
from payment.events.dispatcher import EventDispatcher

logger = logging.getLogger(__name__)


def send_bill(notification: BillRequested) -> None:
    """Procesa una solicitud de factura (simulado)."""
    logger.info(f"🧾 FACTURA: Recibida solicitud para el pedido {notification.order_id}")
    logger.info(f"✅ FACTURA: Enviada al cliente {notification.order.customer_id} para el pedido {notification.order_id}")


def register_billing_listeners(dispatcher: EventDispatcher) -> None:
    """Registra los listeners de facturación. Se llama una vez al arrancar."""
    dispatcher.register(BillRequested, send_bill)
