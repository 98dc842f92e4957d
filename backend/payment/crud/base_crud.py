# backend/payment/crud/base_crud.py

"""
Operaciones CRUD genéricas sobre los modelos del servicio.

Este módulo implementa la pasarela de persistencia común a clientes,
pedidos y productos:

- save(): asigna id y fecha de creación si faltan, recarga el grafo dentro
  de la transacción y solo entonces confirma
- find_by_id(): devuelve None si no existe (nunca lanza NotFound)
- find_page(): página 1-based con el total de registros

Los errores de SQLAlchemy se traducen a PersistenceFailure, distinguiendo
las violaciones de integridad del resto de fallos de almacenamiento.
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Generic, List, Optional, Sequence, Tuple, Type, TypeVar

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from payment.core.exceptions import PersistenceFailure
from payment.db.database import Base

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=Base)
IdType = TypeVar("IdType")


class CRUDBase(Generic[ModelType, IdType]):
    """
    Pasarela de persistencia para un modelo.

    Args:
        model: Clase del modelo SQLAlchemy
        load_options: Opciones de carga (selectinload) aplicadas a toda lectura
        owned_children: Relaciones de propiedad cuyos elementos también
            reciben id y fecha de creación al guardar
    """

    def __init__(
        self,
        model: Type[ModelType],
        load_options: Sequence[Any] = (),
        owned_children: Sequence[str] = (),
    ):
        self.model = model
        self.load_options = tuple(load_options)
        self.owned_children = tuple(owned_children)

    # ========================================
    # ESCRITURA
    # ========================================

    def assign_generated_fields(self, entity: ModelType) -> ModelType:
        """
        Genera id y created_at donde falten, una única vez.

        Se aplica a la entidad y a sus hijos de propiedad; los valores ya
        asignados nunca se sobrescriben.
        """
        now = datetime.now(timezone.utc)
        targets = [entity]
        for attr in self.owned_children:
            targets.extend(getattr(entity, attr))

        for target in targets:
            if target.id is None:
                target.id = uuid.uuid4()
            if target.created_at is None:
                target.created_at = now
        return entity

    async def save(self, db: AsyncSession, entity: ModelType) -> ModelType:
        """
        Persiste la entidad y devuelve el grafo recargado desde la base de datos.

        La recarga se hace dentro de la transacción, antes del commit: si
        falla cualquier paso no queda nada confirmado.
        """
        self.assign_generated_fields(entity)
        db.add(entity)
        try:
            await db.flush()
            result = await db.execute(self._by_id_query(entity.id, refresh=True))
            persisted = result.scalars().first()
            await db.commit()
        except IntegrityError as exc:
            await db.rollback()
            logger.error(f"❌ Violación de integridad guardando {self.model.__name__}: {exc.orig}")
            raise PersistenceFailure(
                f"Integrity violation while saving {self.model.__name__}",
                reason=PersistenceFailure.INTEGRITY,
            ) from exc
        except SQLAlchemyError as exc:
            await db.rollback()
            logger.error(f"❌ Error de almacenamiento guardando {self.model.__name__}: {exc}")
            raise PersistenceFailure(
                f"Storage error while saving {self.model.__name__}",
                reason=PersistenceFailure.STORAGE,
            ) from exc

        return persisted if persisted is not None else entity

    # ========================================
    # LECTURA
    # ========================================

    def _by_id_query(self, id: IdType, refresh: bool = False):
        query = select(self.model).options(*self.load_options).filter(self.model.id == id)
        if refresh:
            query = query.execution_options(populate_existing=True)
        return query

    async def find_by_id(self, db: AsyncSession, id: IdType) -> Optional[ModelType]:
        """Obtiene una entidad por id con sus relaciones precargadas, o None."""
        try:
            result = await db.execute(self._by_id_query(id))
        except SQLAlchemyError as exc:
            logger.error(f"❌ Error de almacenamiento leyendo {self.model.__name__} {id}: {exc}")
            raise PersistenceFailure(
                f"Storage error while reading {self.model.__name__}",
                reason=PersistenceFailure.STORAGE,
            ) from exc
        return result.scalars().first()

    async def find_page(self, db: AsyncSession, page_number: int, page_size: int) -> Tuple[List[ModelType], int]:
        """
        Obtiene una página de entidades y el total de registros.

        El orden (created_at, id) es estable mientras los datos no cambien.
        """
        query = (
            select(self.model)
            .options(*self.load_options)
            .order_by(self.model.created_at, self.model.id)
            .offset((page_number - 1) * page_size)
            .limit(page_size)
        )
        try:
            total = (await db.execute(select(func.count()).select_from(self.model))).scalar() or 0
            result = await db.execute(query)
        except SQLAlchemyError as exc:
            logger.error(f"❌ Error de almacenamiento listando {self.model.__name__}: {exc}")
            raise PersistenceFailure(
                f"Storage error while listing {self.model.__name__}",
                reason=PersistenceFailure.STORAGE,
            ) from exc
        return list(result.scalars().all()), total
