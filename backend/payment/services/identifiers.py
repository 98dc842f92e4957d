# backend/payment/services/identifiers.py
"""Conversión de identificadores recibidos como texto."""

from uuid import UUID

from payment.core.exceptions import InvalidUuid


def parse_uuid(value: str, entity: str = "entity") -> UUID:
    """
    Convierte un texto en UUID.

    Raises:
        InvalidUuid: si el texto no es un UUID válido. Es un error de
            entrada, distinto de un id bien formado que no existe.
    """
    try:
        return UUID(str(value))
    except (ValueError, TypeError, AttributeError) as exc:
        raise InvalidUuid(value, entity) from exc
