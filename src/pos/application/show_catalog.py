"""Application service: Show Catalog use case (query)."""

from __future__ import annotations

from pos.application.dto import CatalogLineDTO
from pos.domain.repository.product_repository import ProductRepository


class ShowCatalogHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> list[CatalogLineDTO]:
        return [
            CatalogLineDTO(
                display_name=p.display_name,
                price=str(p.price),
                in_stock=p.quantity,
                shippable=p.shipping_info is not None,
                expires=(
                    p.expires_at.strftime("%Y-%m-%d")
                    if p.expires_at is not None
                    else None
                ),
            )
            for p in self._product_repo.list_all()
        ]
