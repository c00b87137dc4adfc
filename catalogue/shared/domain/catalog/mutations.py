"""Product mutation flows: add, update, delete and clear-all.

``ProductForm`` carries the raw text a user typed; it is validated and turned
into a wire payload before anything is sent. Validation failures raise
:class:`~catalogue.shared.core.errors.ValidationError` and never reach the
gateway.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

from catalogue.shared.core.errors import RemoteCallError, ValidationError
from catalogue.shared.domain.models import DEFAULT_CATEGORY, Product, format_number, parse_number
from catalogue.shared.infrastructure.remote.gateway import Action, RemoteGateway

logger = logging.getLogger(__name__)

MISSING_FIELDS_MESSAGE = "Please fill in Product Name, Price, and Category."
INVALID_PRICE_MESSAGE = "Price must be a valid number."

ProductId = Union[int, float, str, bool]


def parse_image_urls(text: Optional[str]) -> List[str]:
    """Split comma-separated URLs, trimming and dropping empties."""
    if not text:
        return []
    return [url.strip() for url in text.split(",") if url.strip()]


@dataclass
class ProductForm:
    """Raw field values of the add/edit product forms."""
    name: str = ""
    description: str = ""
    price: str = ""
    category: str = DEFAULT_CATEGORY
    image_urls_input: str = ""
    product_id: Optional[ProductId] = None

    @classmethod
    def from_product(cls, product: Product) -> "ProductForm":
        price = "" if product.price is None else format_number(product.price)
        return cls(
            name=product.name,
            description=product.description,
            price=price,
            category=product.category or DEFAULT_CATEGORY,
            image_urls_input=", ".join(product.image_urls),
            product_id=product.id,
        )

    def validate(self) -> Optional[str]:
        """Return a user-facing message, or None when the form is complete."""
        if not self.name.strip() or not str(self.price).strip() or not self.category:
            return MISSING_FIELDS_MESSAGE
        price = parse_number(self.price)
        if price is None or price < 0:
            return INVALID_PRICE_MESSAGE
        return None

    def image_urls(self) -> List[str]:
        return parse_image_urls(self.image_urls_input)

    def to_payload(self) -> Dict[str, Any]:
        """Wire payload. Call :meth:`validate` first."""
        payload: Dict[str, Any] = {
            "name": self.name,
            "description": self.description,
            "price": parse_number(self.price),
            "category": self.category,
            "imageUrl": self.image_urls(),
        }
        if self.product_id is not None:
            payload = {"id": self.product_id, **payload}
        return payload

    def clear(self, category: Optional[str] = None) -> None:
        self.name = ""
        self.description = ""
        self.price = ""
        self.image_urls_input = ""
        self.category = category or DEFAULT_CATEGORY


class ProductMutations:
    """Write side of the catalogue."""

    def __init__(self, gateway: RemoteGateway) -> None:
        self.gateway = gateway

    async def add(self, form: ProductForm) -> Dict[str, Any]:
        payload = self._validated_payload(form)
        payload.pop("id", None)
        logger.info(f"ProductMutations: adding '{payload['name']}' to {payload['category']}")
        return await self._call(Action.ADD, {"product": payload})

    async def update(self, form: ProductForm) -> Product:
        """Update an existing product and return it as submitted."""
        if form.product_id is None:
            raise ValidationError("Cannot update a product without an id.")
        payload = self._validated_payload(form)
        logger.info(f"ProductMutations: updating product {form.product_id}")
        await self._call(Action.UPDATE, {"product": payload})
        return Product.model_validate(payload)

    async def delete(self, product_id: ProductId) -> Dict[str, Any]:
        logger.info(f"ProductMutations: deleting product {product_id}")
        return await self._call(Action.DELETE, {"id": product_id})

    async def clear_all(self) -> Dict[str, Any]:
        logger.warning("ProductMutations: clearing ALL catalogue data")
        return await self._call(Action.CLEAR_ALL)

    @staticmethod
    def _validated_payload(form: ProductForm) -> Dict[str, Any]:
        problem = form.validate()
        if problem:
            raise ValidationError(problem)
        return form.to_payload()

    async def _call(self, action: Action, payload: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        data = await self.gateway.call(action, payload)
        if data.get("success") is False:
            message = data.get("message") if isinstance(data.get("message"), str) else None
            raise RemoteCallError(message, payload=data)
        return data
