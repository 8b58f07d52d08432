"""Pydantic models for catalog product request bodies."""

from typing import Literal

from pydantic import BaseModel, ConfigDict

ProductType = Literal["PHYSICAL", "DIGITAL", "SERVICE"]


class ProductCreateOptions(BaseModel):
    """Body for ``POST /v1/catalogs/products``.

    Every field is optional; PayPal decides which combinations it accepts.
    Unknown fields are passed through unchanged.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str | None = None
    """Caller-chosen product ID; PayPal generates one when omitted."""

    name: str | None = None
    description: str | None = None
    type: ProductType | None = None
    category: str | None = None
    image_url: str | None = None
    home_url: str | None = None


__all__ = ["ProductCreateOptions", "ProductType"]
