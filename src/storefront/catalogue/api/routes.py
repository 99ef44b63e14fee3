"""FastAPI endpoints for the catalogue: products and categories."""

import json

from fastapi import APIRouter, Query, Response
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from storefront.catalogue.api.schemas import (
    CategoryResponse,
    CreateCategoryRequest,
    CreateProductRequest,
    ProductResponse,
    UpdateCategoryRequest,
    UpdateProductRequest,
)
from storefront.catalogue.category.category import Category
from storefront.catalogue.category.management import CreateCategory, DeleteCategory, UpdateCategory
from storefront.catalogue.product.management import CreateProduct, DeleteProduct, UpdateProduct
from storefront.catalogue.product.product import Product
from storefront.errors import dispatch

product_router = APIRouter(prefix="/api/products", tags=["products"])
category_router = APIRouter(prefix="/api/categories", tags=["categories"])


# --- Product endpoints ---


@product_router.get("", response_model=list[ProductResponse])
async def list_products(category_id: str | None = Query(None, alias="categoryId")) -> list[ProductResponse]:
    repo = current_domain.repository_for(Product)
    products = repo.in_category(category_id) if category_id else repo.all_products()
    return [ProductResponse.from_aggregate(p) for p in products]


@product_router.get("/featured", response_model=list[ProductResponse])
async def list_featured_products() -> list[ProductResponse]:
    products = current_domain.repository_for(Product).featured()
    return [ProductResponse.from_aggregate(p) for p in products]


@product_router.get("/{slug}", response_model=ProductResponse)
async def get_product(slug: str) -> ProductResponse:
    product = current_domain.repository_for(Product).by_slug_or_id(slug)
    if product is None:
        raise ObjectNotFoundError("Product not found")
    return ProductResponse.from_aggregate(product)


@product_router.post("", status_code=201, response_model=ProductResponse)
async def create_product(body: CreateProductRequest) -> ProductResponse:
    command = CreateProduct(
        name=body.name,
        slug=body.slug,
        description=body.description,
        price=body.price,
        category_id=body.category_id,
        images=json.dumps(body.images),
        stock=body.stock,
        material=body.material,
        featured=body.featured,
    )
    return ProductResponse.from_aggregate(dispatch(command))


@product_router.put("/{product_id}", response_model=ProductResponse)
async def update_product(product_id: str, body: UpdateProductRequest) -> ProductResponse:
    command = UpdateProduct(
        product_id=product_id,
        name=body.name,
        slug=body.slug,
        description=body.description,
        price=body.price,
        category_id=body.category_id,
        images=json.dumps(body.images) if body.images is not None else None,
        stock=body.stock,
        material=body.material,
        featured=body.featured,
    )
    return ProductResponse.from_aggregate(dispatch(command))


@product_router.delete("/{product_id}", status_code=204)
async def delete_product(product_id: str) -> Response:
    dispatch(DeleteProduct(product_id=product_id))
    return Response(status_code=204)


# --- Category endpoints ---


@category_router.get("", response_model=list[CategoryResponse])
async def list_categories() -> list[CategoryResponse]:
    categories = current_domain.repository_for(Category).in_display_order()
    return [CategoryResponse.from_aggregate(c) for c in categories]


@category_router.get("/{slug}", response_model=CategoryResponse)
async def get_category(slug: str) -> CategoryResponse:
    repo = current_domain.repository_for(Category)
    category = repo.by_slug(slug) or repo.find(slug)
    if category is None:
        raise ObjectNotFoundError("Category not found")
    return CategoryResponse.from_aggregate(category)


@category_router.post("", status_code=201, response_model=CategoryResponse)
async def create_category(body: CreateCategoryRequest) -> CategoryResponse:
    command = CreateCategory(
        name=body.name,
        slug=body.slug,
        description=body.description,
        image_url=body.image_url,
        display_order=body.display_order,
    )
    return CategoryResponse.from_aggregate(dispatch(command))


@category_router.put("/{category_id}", response_model=CategoryResponse)
async def update_category(category_id: str, body: UpdateCategoryRequest) -> CategoryResponse:
    command = UpdateCategory(
        category_id=category_id,
        name=body.name,
        slug=body.slug,
        description=body.description,
        image_url=body.image_url,
        display_order=body.display_order,
    )
    return CategoryResponse.from_aggregate(dispatch(command))


@category_router.delete("/{category_id}", status_code=204)
async def delete_category(category_id: str) -> Response:
    dispatch(DeleteCategory(category_id=category_id))
    return Response(status_code=204)
