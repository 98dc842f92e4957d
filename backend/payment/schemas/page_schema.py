# backend/payment/schemas/page_schema.py
"""Esquema genérico de respuesta paginada."""

from typing import Generic, List, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class Page(BaseModel, Generic[T]):
    items: List[T] = Field(default_factory=list)
    page: int = Field(..., description="Número de página (1-based)", ge=1)
    size: int = Field(..., description="Tamaño de página ya acotado", ge=1)
    total: int = Field(..., description="Total de registros", ge=0)
