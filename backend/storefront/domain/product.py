"""
Product Domain Model

Read-only product view-model served by the catalog.
The storefront never mutates products; they are owned by the catalog source.

Author: TM3
Date: 2025-10-17
"""
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional
from decimal import Decimal


class Product(BaseModel):
    """
    Product view-model - a catalog product shaped for display

    Fields:
        id: Internal product ID
        title: Product title
        summary: Short description (optional)
        category: Product category (optional, case preserved)
        price: Current price
        image_url: Thumbnail URL (optional)
    """

    id: int = Field(..., description="Internal product ID")
    title: str = Field(..., description="Product title")
    summary: Optional[str] = Field(None, description="Short description")
    category: Optional[str] = Field(None, description="Product category")
    price: Decimal = Field(..., description="Current price", ge=0)
    image_url: Optional[str] = Field(None, description="Thumbnail URL")

    model_config = ConfigDict(
        from_attributes=True,
        frozen=True,
    )

    def matches_text(self, needle: str) -> bool:
        """
        Case-insensitive substring match on title, summary or category.

        `needle` must already be lowercased. None fields are skipped; an
        empty-string field is still searched.
        """
        if needle in self.title.lower():
            return True
        if self.summary is not None and needle in self.summary.lower():
            return True
        if self.category is not None and needle in self.category.lower():
            return True
        return False

    def in_category(self, category: str) -> bool:
        """Case-insensitive exact category match. None never matches."""
        return self.category is not None and self.category.lower() == category.lower()

    def to_dict(self) -> dict:
        """Convert to dictionary with Decimal to float conversion"""
        data = self.model_dump()
        data['price'] = float(self.price)
        return data
