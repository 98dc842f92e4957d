# backend/payment/core/logging_config.py
"""
Configuración del logging de la aplicación.

Todos los módulos usan `logging.getLogger(__name__)`; aquí solo se fija
el nivel y el formato del logger raíz a partir de la configuración.
"""

import logging

from payment.core.config import settings


def setup_logging(level: str = None, log_format: str = None) -> None:
    """Configura el logger raíz con el nivel y formato de `settings`."""
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format=log_format or settings.LOG_FORMAT,
    )
    # El pool de SQLAlchemy es muy ruidoso en INFO
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
