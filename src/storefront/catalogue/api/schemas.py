"""Pydantic request/response schemas for the Catalogue API."""

from __future__ import annotations

import json
from datetime import datetime

from pydantic import ConfigDict, Field

from storefront.shared.schema import CamelModel

# --- Product Schemas ---


class CreateProductRequest(CamelModel):
    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "name": "Golden Elegance Ring",
                    "slug": "golden-elegance-ring",
                    "description": "Handcrafted 18k gold ring with an intricate floral motif.",
                    "price": "4999",
                    "categoryId": "cat_3",
                    "images": ["https://images.example.com/rings/golden-elegance.jpg"],
                    "stock": 15,
                    "material": "18k Gold",
                    "featured": True,
                }
            ]
        }
    )

    name: str = Field(..., min_length=1, max_length=255)
    slug: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1)
    price: str
    category_id: str
    images: list[str] = Field(..., min_length=1)
    stock: int = Field(0, ge=0)
    material: str | None = Field(None, max_length=100)
    featured: bool = False


class UpdateProductRequest(CamelModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    slug: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = None
    price: str | None = None
    category_id: str | None = None
    images: list[str] | None = Field(None, min_length=1)
    stock: int | None = Field(None, ge=0)
    material: str | None = Field(None, max_length=100)
    featured: bool | None = None


class ProductResponse(CamelModel):
    id: str
    name: str
    slug: str
    description: str
    price: str
    category_id: str
    images: list[str]
    stock: int
    material: str | None = None
    featured: bool
    created_at: datetime | None = None

    @classmethod
    def from_aggregate(cls, product) -> ProductResponse:
        return cls(
            id=str(product.id),
            name=product.name,
            slug=product.slug,
            description=product.description,
            price=product.price,
            category_id=str(product.category_id),
            images=json.loads(product.images) if product.images else [],
            stock=product.stock,
            material=product.material,
            featured=bool(product.featured),
            created_at=product.created_at,
        )


# --- Category Schemas ---


class CreateCategoryRequest(CamelModel):
    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "name": "Earrings",
                    "slug": "earrings",
                    "description": "Studs, hoops and drops",
                    "displayOrder": 2,
                }
            ]
        }
    )

    name: str = Field(..., min_length=1, max_length=100)
    slug: str = Field(..., min_length=1, max_length=120)
    description: str | None = None
    image_url: str | None = Field(None, max_length=500)
    display_order: int = 0


class UpdateCategoryRequest(CamelModel):
    name: str | None = Field(None, min_length=1, max_length=100)
    slug: str | None = Field(None, min_length=1, max_length=120)
    description: str | None = None
    image_url: str | None = Field(None, max_length=500)
    display_order: int | None = None


class CategoryResponse(CamelModel):
    id: str
    name: str
    slug: str
    description: str | None = None
    image_url: str | None = None
    display_order: int

    @classmethod
    def from_aggregate(cls, category) -> CategoryResponse:
        return cls(
            id=str(category.id),
            name=category.name,
            slug=category.slug,
            description=category.description,
            image_url=category.image_url,
            display_order=category.display_order or 0,
        )
