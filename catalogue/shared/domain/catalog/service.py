"""Catalog accessor.

Fetches the whole product list and derives views from it client-side; the
spreadsheet endpoint has no query support.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from catalogue.shared.domain.models import Product
from catalogue.shared.infrastructure.remote.gateway import RemoteGateway

logger = logging.getLogger(__name__)


def filter_by_category(products: Iterable[Product], category: Optional[str]) -> List[Product]:
    """Exact, case-sensitive category match."""
    return [product for product in products if product.category == category]


def search_products(products: Iterable[Product], term: Optional[str]) -> List[Product]:
    """Case-insensitive substring match on name or description."""
    needle = (term or "").lower()
    results = []
    for product in products:
        name = product.name.lower() if product.name else ""
        description = product.description.lower() if product.description else ""
        if (name and needle in name) or (description and needle in description):
            results.append(product)
    return results


def filter_by_name(products: Iterable[Product], text: Optional[str]) -> List[Product]:
    """Name-only filter used by the product management list."""
    needle = (text or "").lower()
    return [product for product in products if product.name and needle in product.name.lower()]


class CatalogAccessor:
    """Read side of the catalogue."""

    def __init__(self, gateway: RemoteGateway) -> None:
        self.gateway = gateway
        self.products: List[Product] = []

    async def fetch_all(self) -> List[Product]:
        """Fetch every product; an unreachable endpoint yields ``[]``."""
        self.products = await self.gateway.fetch_all()
        return self.products

    def by_category(self, category: Optional[str], products: Optional[Iterable[Product]] = None) -> List[Product]:
        return filter_by_category(self.products if products is None else products, category)

    def search(self, term: Optional[str], products: Optional[Iterable[Product]] = None) -> List[Product]:
        results = search_products(self.products if products is None else products, term)
        logger.debug(f"CatalogAccessor: search {term!r} matched {len(results)} product(s)")
        return results

    def filter_by_name(self, text: Optional[str], products: Optional[Iterable[Product]] = None) -> List[Product]:
        return filter_by_name(self.products if products is None else products, text)
