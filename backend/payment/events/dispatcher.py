# backend/payment/events/dispatcher.py
"""
Dispatcher de eventos en proceso.

Registro explícito de tipo de notificación -> lista ordenada de handlers.
No hay bus global: se construye una instancia al arrancar la aplicación y
se pasa a los servicios que publican.

Características:
- publish() es síncrono y entrega en orden de registro, en el hilo que llama
- el fallo de un handler se registra en el log y no impide la entrega
  a los siguientes ni se propaga a quien publica
- registrar dos veces el mismo handler produce dos entregas
"""

import logging
import threading
from typing import Any, Callable, Dict, Tuple, Type

logger = logging.getLogger(__name__)

EventHandler = Callable[[Any], Any]


class EventDispatcher:
    """Registro de listeners por tipo de notificación."""

    def __init__(self) -> None:
        self._handlers: Dict[Type, Tuple[EventHandler, ...]] = {}
        self._lock = threading.Lock()

    def register(self, notification_type: Type, handler: EventHandler) -> None:
        """
        Registra un handler para un tipo de notificación.

        Copy-on-write: se sustituye la tupla completa bajo el lock, así
        publish() puede iterar su copia sin bloquear.
        """
        with self._lock:
            current = self._handlers.get(notification_type, ())
            self._handlers[notification_type] = current + (handler,)
        logger.debug(f"Handler {_handler_name(handler)} registrado para {notification_type.__name__}")

    def handlers_for(self, notification_type: Type) -> Tuple[EventHandler, ...]:
        return self._handlers.get(notification_type, ())

    def publish(self, notification: Any) -> int:
        """
        Entrega la notificación a todos los handlers de su tipo.

        Returns:
            Número de entregas fallidas
        """
        notification_type = type(notification)
        failures = 0
        for handler in self.handlers_for(notification_type):
            try:
                handler(notification)
            except Exception:
                failures += 1
                logger.exception(
                    f"❌ Error en el handler {_handler_name(handler)} para {notification_type.__name__}"
                )
        return failures


def _handler_name(handler: EventHandler) -> str:
    return getattr(handler, "__qualname__", repr(handler))
