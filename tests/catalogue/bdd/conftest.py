"""Shared BDD fixtures and step definitions for the catalogue."""

import json

import pytest
from protean.utils.globals import current_domain
from pytest_bdd import given, parsers
from storefront.catalogue.category.management import CreateCategory
from storefront.catalogue.product.management import CreateProduct


@pytest.fixture()
def error():
    """Container for captured errors."""
    return {"exc": None}


@given(parsers.cfparse('a category "{name}" with slug "{slug}" at position {position:d}'))
def category_exists(name, slug, position):
    current_domain.process(
        CreateCategory(name=name, slug=slug, display_order=position),
        asynchronous=False,
    )


@given(parsers.cfparse('a product "{name}" with slug "{slug}" priced "{price}"'))
def product_exists(name, slug, price):
    current_domain.process(
        CreateProduct(
            name=name,
            slug=slug,
            description=f"{name} from the Rai Aura collection",
            price=price,
            category_id="cat-default",
            images=json.dumps([f"/images/products/{slug}.jpg"]),
            stock=10,
        ),
        asynchronous=False,
    )
