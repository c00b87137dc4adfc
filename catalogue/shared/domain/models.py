"""Catalogue domain models: categories, products and display settings.

Wire format is the camelCase JSON spoken by the spreadsheet endpoint; Python
attributes are snake_case and populated through aliases.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Category(str, Enum):
    """The 13 fixed catalogue labels, in dashboard order."""
    BEDDING = "Bedding"
    TOWELS = "Towels"
    BATHROOM_AMENITIES = "Bathroom Amenities"
    GUEST_SUPPLIES = "Guest Supplies"
    HOUSEKEEPING = "Housekeeping"
    LOBBY = "Lobby"
    LEATHER_ACCESSORIES = "Leather Accessories"
    SAFETY_BOXES = "Safety Boxes"
    RESTAURANT_SUPPLIES = "Restaurant Supplies"
    HOSPITAL_SUPPLIES = "Hospital Supplies"
    SPA_SUPPLIES = "Spa Supplies"
    ECO_FRIENDLY = "Eco-Friendly"
    S_COLLECTION = "S-Collection"

    @classmethod
    def labels(cls) -> List[str]:
        return [member.value for member in cls]


DEFAULT_CATEGORY = Category.BEDDING.value


def parse_number(value: Any) -> Optional[float]:
    """Lenient numeric parse. Returns None for anything not a finite number."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        text = str(value).strip().lstrip("$").replace(",", "")
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    if not math.isfinite(number):
        return None
    return number


def format_number(value: float) -> str:
    """Exact text for a number; whole numbers drop the trailing ``.0``."""
    number = float(value)
    if number.is_integer() and abs(number) < 1e16:
        return str(int(number))
    return repr(number)


class Product(BaseModel):
    """A catalogue product as held transiently by the client."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: Optional[Union[int, float, str, bool]] = None
    name: str = ""
    description: str = ""
    price: Optional[float] = None
    category: str = ""
    image_urls: List[str] = Field(default_factory=list, alias="imageUrl")

    @field_validator("id", mode="before")
    @classmethod
    def _scalar_id(cls, value: Any) -> Any:
        # Ids belong to the spreadsheet and go back exactly as received
        if isinstance(value, (bool, int, str)):
            return value
        if isinstance(value, float):
            if not math.isfinite(value):
                return None
            return int(value) if value.is_integer() else value
        return None

    @field_validator("name", "description", "category", mode="before")
    @classmethod
    def _text_or_empty(cls, value: Any) -> str:
        if value is None:
            return ""
        return str(value)

    @field_validator("price", mode="before")
    @classmethod
    def _lenient_price(cls, value: Any) -> Optional[float]:
        return parse_number(value)

    @field_validator("image_urls", mode="before")
    @classmethod
    def _always_a_list(cls, value: Any) -> List[str]:
        # Anything that is not a list renders as the "no image" placeholder
        if not isinstance(value, list):
            return []
        return [url.strip() for url in value if isinstance(url, str) and url.strip()]

    @property
    def price_label(self) -> str:
        if self.price is None:
            return "—"
        return f"${self.price:.2f}"

    def thumbnail_url(self, placeholder: str) -> str:
        return self.image_urls[0] if self.image_urls else placeholder

    def gallery(self, placeholder: str) -> List[str]:
        """Image URLs to display; never empty."""
        return list(self.image_urls) or [placeholder]

    def to_wire(self) -> Dict[str, Any]:
        data = self.model_dump(by_alias=True)
        if data.get("id") is None:
            data.pop("id", None)
        return data


DEFAULT_BACKGROUND_URL = (
    "https://images.pexels.com/photos/262048/pexels-photo-262048.jpeg"
    "?auto=compress&cs=tinysrgb&w=1260&h=750&dpr=1"
)
DEFAULT_FONT_FAMILY = "'Segoe UI', Tahoma, Geneva, Verdana, sans-serif"

MIN_GRID_COLUMNS = 1
MAX_GRID_COLUMNS = 5


class DisplaySettings(BaseModel):
    """Cosmetic settings persisted on the remote side."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    background_url: str = Field(default=DEFAULT_BACKGROUND_URL, alias="backgroundUrl")
    primary_color: str = Field(default="#007BFF", alias="primaryColor")
    secondary_color: str = Field(default="#28a745", alias="secondaryColor")
    font_family: str = Field(default=DEFAULT_FONT_FAMILY, alias="fontFamily")
    base_font_size_px: float = Field(default=16, gt=0, alias="baseFontSizePx")
    category_grid_columns: int = Field(default=3, ge=1, alias="categoryGridColumns")

    def to_wire(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


TEXT_SETTING_FIELDS = ("backgroundUrl", "primaryColor", "secondaryColor", "fontFamily")


def parse_font_size(value: Any) -> Optional[float]:
    """Positive finite number, or None."""
    number = parse_number(value)
    if number is None or number <= 0:
        return None
    return number


def parse_grid_columns(value: Any) -> Optional[int]:
    """Positive whole number, or None. ``"4"`` and ``4.0`` are accepted."""
    number = parse_number(value)
    if number is None or number <= 0 or not float(number).is_integer():
        return None
    return int(number)
