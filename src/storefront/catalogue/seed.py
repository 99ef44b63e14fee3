"""Starter catalogue: the four jewellery categories and a few sample pieces.

Seeding is idempotent: categories and products whose slug already exists are
left alone.
"""

import json

from protean.utils.globals import current_domain

from storefront.catalogue.category.category import Category
from storefront.catalogue.category.management import CreateCategory
from storefront.catalogue.product.management import CreateProduct
from storefront.catalogue.product.product import Product
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

CATEGORIES = [
    {"name": "Bracelet", "slug": "bracelet", "description": "Beautiful bracelets for every occasion", "image_url": "/images/bracelet.jpg"},
    {"name": "Earrings", "slug": "earrings", "description": "Elegant earrings and studs", "image_url": "/images/earring.jpg"},
    {"name": "Ring", "slug": "ring", "description": "Exquisite rings for all styles", "image_url": "/images/ring.jpg"},
    {"name": "Neckchain", "slug": "neckchain", "description": "Stunning neckchains and pendants", "image_url": "/images/neckchain.jpg"},
]

PRODUCTS = [
    {
        "name": "Golden Elegance Ring",
        "slug": "golden-elegance-ring",
        "description": "A stunning 18K gold ring with intricate design, perfect for special occasions.",
        "price": "4999",
        "category": "ring",
        "images": ["/images/products/ring1.jpg"],
        "material": "18K Gold",
        "stock": 15,
        "featured": True,
    },
    {
        "name": "Diamond Solitaire Ring",
        "slug": "diamond-solitaire-ring",
        "description": "Classic diamond solitaire ring with brilliant cut stone.",
        "price": "12999",
        "category": "ring",
        "images": ["/images/products/ring2.jpg"],
        "material": "Platinum, Diamond",
        "stock": 8,
        "featured": True,
    },
    {
        "name": "Pearl Drop Earrings",
        "slug": "pearl-drop-earrings",
        "description": "Elegant freshwater pearl drop earrings with gold accents.",
        "price": "2499",
        "category": "earrings",
        "images": ["/images/products/earring1.jpg"],
        "material": "Gold, Pearl",
        "stock": 20,
        "featured": True,
    },
    {
        "name": "Crystal Stud Earrings",
        "slug": "crystal-stud-earrings",
        "description": "Sparkling crystal studs for everyday elegance.",
        "price": "1299",
        "category": "earrings",
        "images": ["/images/products/earring2.jpg"],
        "material": "Sterling Silver, Crystal",
        "stock": 30,
        "featured": False,
    },
    {
        "name": "Rose Gold Bracelet",
        "slug": "rose-gold-bracelet",
        "description": "Delicate rose gold bracelet with heart charm.",
        "price": "3499",
        "category": "bracelet",
        "images": ["/images/products/bracelet1.jpg"],
        "material": "Rose Gold",
        "stock": 12,
        "featured": True,
    },
    {
        "name": "Silver Chain Necklace",
        "slug": "silver-chain-necklace",
        "description": "Classic sterling silver chain necklace, versatile and timeless.",
        "price": "1999",
        "category": "neckchain",
        "images": ["/images/products/neckchain1.jpg"],
        "material": "Sterling Silver",
        "stock": 25,
        "featured": True,
    },
]


def seed_catalogue() -> dict:
    """Create any missing starter categories and products. Must run in a domain context."""
    category_repo = current_domain.repository_for(Category)
    product_repo = current_domain.repository_for(Product)
    created = {"categories": 0, "products": 0}

    category_ids = {}
    for position, data in enumerate(CATEGORIES, start=1):
        category = category_repo.by_slug(data["slug"])
        if category is None:
            category = current_domain.process(CreateCategory(display_order=position, **data), asynchronous=False)
            created["categories"] += 1
        category_ids[data["slug"]] = str(category.id)

    for data in PRODUCTS:
        if product_repo.by_slug(data["slug"]):
            continue
        fields = {k: v for k, v in data.items() if k not in ("category", "images")}
        current_domain.process(
            CreateProduct(
                category_id=category_ids[data["category"]],
                images=json.dumps(data["images"]),
                **fields,
            ),
            asynchronous=False,
        )
        created["products"] += 1

    logger.info("catalogue_seeded", **created)
    return created
