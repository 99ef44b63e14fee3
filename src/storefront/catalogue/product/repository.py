"""Product lookups beyond get-by-id."""

from protean.exceptions import ObjectNotFoundError

from storefront.catalogue.product.product import Product
from storefront.domain import storefront


@storefront.repository(part_of=Product)
class ProductRepository:
    def find(self, product_id) -> Product | None:
        try:
            return self.get(product_id)
        except ObjectNotFoundError:
            return None

    def by_slug(self, slug: str) -> Product | None:
        results = self._dao.query.filter(slug=slug).all().items
        return results[0] if results else None

    def by_slug_or_id(self, key: str) -> Product | None:
        return self.by_slug(key) or self.find(key)

    def all_products(self) -> list[Product]:
        products = self._dao.query.all().items
        return sorted(products, key=lambda p: p.created_at, reverse=True)

    def featured(self) -> list[Product]:
        return [p for p in self.all_products() if p.featured]

    def in_category(self, category_id) -> list[Product]:
        return [p for p in self.all_products() if str(p.category_id) == str(category_id)]

    def discard(self, product: Product) -> None:
        self._dao.delete(product)
