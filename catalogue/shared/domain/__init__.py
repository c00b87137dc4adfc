"""
Shared Domain Module
====================

Catalogue business logic: models, the catalog accessor, product mutations,
the display settings store and the static authenticator.

Only the models are re-exported here; import services from their
subpackages.
"""

from catalogue.shared.domain.models import (
    Category,
    DEFAULT_CATEGORY,
    DisplaySettings,
    Product,
)

__all__ = [
    "Category",
    "DEFAULT_CATEGORY",
    "DisplaySettings",
    "Product",
]
