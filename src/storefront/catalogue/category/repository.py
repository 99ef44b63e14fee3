"""Category lookups beyond get-by-id."""

from protean.exceptions import ObjectNotFoundError

from storefront.catalogue.category.category import Category
from storefront.domain import storefront


@storefront.repository(part_of=Category)
class CategoryRepository:
    def find(self, category_id) -> Category | None:
        try:
            return self.get(category_id)
        except ObjectNotFoundError:
            return None

    def by_slug(self, slug: str) -> Category | None:
        results = self._dao.query.filter(slug=slug).all().items
        return results[0] if results else None

    def by_name(self, name: str) -> Category | None:
        results = self._dao.query.filter(name=name).all().items
        return results[0] if results else None

    def in_display_order(self) -> list[Category]:
        categories = self._dao.query.all().items
        return sorted(categories, key=lambda c: (c.display_order or 0, c.name))

    def discard(self, category: Category) -> None:
        self._dao.delete(category)
