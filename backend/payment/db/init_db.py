# backend/payment/db/init_db.py
"""
Creación del esquema al arrancar la aplicación.

No hay migraciones: si las tablas no existen se crean a partir de los
modelos declarativos.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncEngine

from payment.db.database import Base, engine as default_engine
from payment.db import models  # noqa: F401  (registra los modelos en Base.metadata)

logger = logging.getLogger(__name__)


async def init_db(engine: AsyncEngine = default_engine) -> None:
    """Crea las tablas que falten en la base de datos."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Esquema de base de datos verificado")
