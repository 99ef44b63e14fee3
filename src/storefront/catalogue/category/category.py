"""Category aggregate root for grouping products in the storefront."""

from protean import invariant
from protean.fields import Integer, String, Text

from storefront.domain import storefront
from storefront.shared.slug import check_slug


@storefront.aggregate
class Category:
    """A named grouping of products (Rings, Earrings, ...) shown in display order.

    Deleting a category does not touch the products filed under it; their
    ``category_id`` simply stops resolving.
    """

    name: String(required=True, max_length=100)
    slug: String(required=True, max_length=120)
    description: Text()
    image_url: String(max_length=500)
    display_order: Integer(default=0)

    @invariant.post
    def slug_must_be_url_safe(self):
        check_slug(self.slug)

    @classmethod
    def create(cls, name, slug, description=None, image_url=None, display_order=0):
        from storefront.catalogue.category.events import CategoryCreated

        category = cls(
            name=name,
            slug=slug,
            description=description,
            image_url=image_url,
            display_order=display_order if display_order is not None else 0,
        )
        category.raise_(
            CategoryCreated(
                category_id=category.id,
                name=name,
                slug=slug,
                display_order=category.display_order,
            )
        )
        return category

    def update_details(self, name=None, slug=None, description=None, image_url=None, display_order=None):
        """Apply a partial update; arguments left as None keep their current value."""
        from storefront.catalogue.category.events import CategoryUpdated

        if name is not None:
            self.name = name
        if slug is not None:
            self.slug = slug
        if description is not None:
            self.description = description
        if image_url is not None:
            self.image_url = image_url
        if display_order is not None:
            self.display_order = display_order

        self.raise_(
            CategoryUpdated(
                category_id=self.id,
                name=self.name,
                slug=self.slug,
                display_order=self.display_order,
            )
        )
