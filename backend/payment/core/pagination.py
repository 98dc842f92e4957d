# backend/payment/core/pagination.py
"""
Parámetros de paginación ya normalizados.

La capa HTTP construye un `PageParams` con `from_query`, que aplica los
valores por defecto y limita el tamaño de página. El CRUD recibe siempre
valores ya acotados.
"""

from dataclasses import dataclass
from typing import Optional

from payment.core.config import settings


@dataclass(frozen=True)
class PageParams:
    page: int
    size: int

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.size

    @classmethod
    def from_query(cls, page: Optional[int] = None, size: Optional[int] = None) -> "PageParams":
        """
        Normaliza los parámetros recibidos por query string.

        - página ausente -> DEFAULT_PAGE_NUMBER; menor que 1 -> 1
        - tamaño ausente -> DEFAULT_PAGE_SIZE; acotado a [1, MAX_PAGE_SIZE]
        """
        page_number = settings.DEFAULT_PAGE_NUMBER if page is None else page
        page_size = settings.DEFAULT_PAGE_SIZE if size is None else size

        if page_number < 1:
            page_number = 1
        if page_size > settings.MAX_PAGE_SIZE:
            page_size = settings.MAX_PAGE_SIZE
        if page_size < 1:
            page_size = 1

        return cls(page=page_number, size=page_size)
