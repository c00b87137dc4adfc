from .service import CatalogAccessor, filter_by_category, filter_by_name, search_products
from .mutations import (
    INVALID_PRICE_MESSAGE,
    MISSING_FIELDS_MESSAGE,
    ProductForm,
    ProductMutations,
    parse_image_urls,
)

__all__ = [
    "CatalogAccessor",
    "filter_by_category",
    "filter_by_name",
    "search_products",
    "INVALID_PRICE_MESSAGE",
    "MISSING_FIELDS_MESSAGE",
    "ProductForm",
    "ProductMutations",
    "parse_image_urls",
]
