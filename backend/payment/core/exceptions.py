# backend/payment/core/exceptions.py
"""
Excepciones de dominio del servicio de pagos.

La capa de servicios lanza estas excepciones y la capa HTTP las traduce
a códigos de estado (ver `payment.api.exception_handlers`):

- InvalidOrder        -> 400
- InvalidUuid         -> 400
- NotFound            -> 404
- PersistenceFailure  -> 500

Los fallos de los listeners de eventos nunca llegan hasta aquí: el
dispatcher los absorbe y solo los registra en el log.
"""

from typing import List, Optional


class PaymentServiceError(Exception):
    """Clase base de todos los errores del servicio."""


class InvalidOrder(PaymentServiceError):
    """
    El pedido no supera la validación de dominio.

    Se lanza antes de cualquier intento de persistencia y contiene
    todos los problemas encontrados, no solo el primero.
    """

    def __init__(self, problems: List[str]):
        self.problems = list(problems)
        super().__init__("; ".join(self.problems) or "Invalid order")


class NotFound(PaymentServiceError):
    """La entidad solicitada no existe. Lo decide el servicio, nunca el CRUD."""

    entity = "Entity"

    def __init__(self, identifier: object, message: Optional[str] = None):
        self.identifier = identifier
        super().__init__(message or f"{self.entity} Not found")


class CustomerNotFound(NotFound):
    entity = "Customer"


class OrderNotFound(NotFound):
    entity = "Order"


class ProductNotFound(NotFound):
    entity = "Product"


class InvalidUuid(PaymentServiceError):
    """El identificador recibido no es un UUID válido."""

    def __init__(self, value: object, entity: str = "entity"):
        self.value = value
        self.entity = entity
        super().__init__(f"Invalid UUID format for {entity} ID")


class PersistenceFailure(PaymentServiceError):
    """
    Error de la capa de almacenamiento.

    `reason` distingue una violación de integridad (por ejemplo un pedido
    que referencia un cliente inexistente) de cualquier otro fallo.
    """

    INTEGRITY = "integrity"
    STORAGE = "storage"

    def __init__(self, message: str, reason: str = STORAGE):
        self.reason = reason
        super().__init__(message)

    @property
    def is_integrity_violation(self) -> bool:
        return self.reason == self.INTEGRITY
