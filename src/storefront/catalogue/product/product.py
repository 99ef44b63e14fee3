"""Product aggregate root."""

import json
from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Identifier, Integer, String, Text

from storefront.domain import storefront
from storefront.shared.money import is_amount, normalize_amount
from storefront.shared.slug import check_slug


def _images_json(images):
    if images is None:
        return None
    if isinstance(images, str):
        return images
    return json.dumps(list(images))


@storefront.aggregate
class Product:
    """A piece of jewellery on sale.

    ``price`` is a two-decimal string and ``images`` an ordered JSON list of
    URIs. ``category_id`` is a weak reference: the category may be deleted
    without affecting the product.
    """

    name: String(required=True, max_length=255)
    slug: String(required=True, max_length=200)
    description: Text(required=True)
    price: String(required=True, max_length=20)
    category_id: Identifier(required=True)
    images: Text(required=True)
    stock: Integer(default=0, min_value=0)
    material: String(max_length=100)
    featured: Boolean(default=False)
    created_at: DateTime(default=lambda: datetime.now(UTC))

    @invariant.post
    def slug_must_be_url_safe(self):
        check_slug(self.slug)

    @invariant.post
    def price_must_be_a_decimal_string(self):
        if self.price is not None and not is_amount(self.price):
            raise ValidationError({"price": [f"Invalid price format: {self.price!r}"]})

    @invariant.post
    def images_must_be_a_non_empty_list(self):
        if self.images is None:
            return
        try:
            images = json.loads(self.images)
        except (json.JSONDecodeError, TypeError):
            raise ValidationError({"images": ["Images must be a JSON list of URIs"]}) from None
        if not isinstance(images, list) or not images:
            raise ValidationError({"images": ["At least one image is required"]})
        if not all(isinstance(url, str) and url for url in images):
            raise ValidationError({"images": ["Every image must be a non-empty URI"]})

    @property
    def image_list(self) -> list[str]:
        return json.loads(self.images) if self.images else []

    @classmethod
    def create(
        cls,
        name,
        slug,
        description,
        price,
        category_id,
        images,
        stock=0,
        material=None,
        featured=False,
    ):
        from storefront.catalogue.product.events import ProductCreated

        product = cls(
            name=name,
            slug=slug,
            description=description,
            price=normalize_amount(price, "price"),
            category_id=category_id,
            images=_images_json(images),
            stock=stock if stock is not None else 0,
            material=material,
            featured=bool(featured),
            created_at=datetime.now(UTC),
        )
        product.raise_(
            ProductCreated(
                product_id=product.id,
                name=name,
                slug=slug,
                price=product.price,
                category_id=category_id,
                created_at=product.created_at,
            )
        )
        return product

    def update_details(
        self,
        name=None,
        slug=None,
        description=None,
        price=None,
        category_id=None,
        images=None,
        stock=None,
        material=None,
        featured=None,
    ):
        """Apply a partial update; arguments left as None keep their current value."""
        from storefront.catalogue.product.events import ProductUpdated

        if name is not None:
            self.name = name
        if slug is not None:
            self.slug = slug
        if description is not None:
            self.description = description
        if price is not None:
            self.price = normalize_amount(price, "price")
        if category_id is not None:
            self.category_id = category_id
        if images is not None:
            self.images = _images_json(images)
        if stock is not None:
            self.stock = stock
        if material is not None:
            self.material = material
        if featured is not None:
            self.featured = featured

        self.raise_(
            ProductUpdated(
                product_id=self.id,
                name=self.name,
                slug=self.slug,
                price=self.price,
                stock=self.stock,
            )
        )

    def reduce_stock(self, quantity: int) -> None:
        """Take ``quantity`` units out of stock for a placed order."""
        from storefront.catalogue.product.events import StockReduced

        if quantity < 1:
            raise ValidationError({"quantity": ["Quantity must be at least 1"]})
        if quantity > self.stock:
            raise ValidationError(
                {"stock": [f"Insufficient stock for {self.name}. Available: {self.stock}, Requested: {quantity}"]}
            )

        self.stock -= quantity
        self.raise_(
            StockReduced(
                product_id=self.id,
                quantity=quantity,
                remaining=self.stock,
            )
        )
