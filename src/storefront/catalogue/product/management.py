"""Product management: commands and handler."""

from protean import handle
from protean.fields import Boolean, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from storefront.catalogue.product.product import Product
from storefront.domain import storefront
from storefront.errors import ConflictError


@storefront.command(part_of="Product")
class CreateProduct:
    name: String(required=True, max_length=255)
    slug: String(required=True, max_length=200)
    description: Text(required=True)
    price: String(required=True, max_length=20)
    category_id: Identifier(required=True)
    images: Text(required=True)  # JSON list of URIs
    stock: Integer(default=0)
    material: String(max_length=100)
    featured: Boolean(default=False)


@storefront.command(part_of="Product")
class UpdateProduct:
    product_id: Identifier(required=True)
    name: String(max_length=255)
    slug: String(max_length=200)
    description: Text()
    price: String(max_length=20)
    category_id: Identifier()
    images: Text()
    stock: Integer()
    material: String(max_length=100)
    featured: Boolean()


@storefront.command(part_of="Product")
class DeleteProduct:
    product_id: Identifier(required=True)


@storefront.command_handler(part_of=Product)
class ManageProductHandler:
    @handle(CreateProduct)
    def create_product(self, command):
        repo = current_domain.repository_for(Product)
        if repo.by_slug(command.slug):
            raise ConflictError(f"A product with slug '{command.slug}' already exists")

        product = Product.create(
            name=command.name,
            slug=command.slug,
            description=command.description,
            price=command.price,
            category_id=command.category_id,
            images=command.images,
            stock=command.stock,
            material=command.material,
            featured=command.featured,
        )
        repo.add(product)
        return product

    @handle(UpdateProduct)
    def update_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)

        if command.slug is not None:
            existing = repo.by_slug(command.slug)
            if existing and existing.id != product.id:
                raise ConflictError(f"A product with slug '{command.slug}' already exists")

        product.update_details(
            name=command.name,
            slug=command.slug,
            description=command.description,
            price=command.price,
            category_id=command.category_id,
            images=command.images,
            stock=command.stock,
            material=command.material,
            featured=command.featured,
        )
        repo.add(product)
        return product

    @handle(DeleteProduct)
    def delete_product(self, command):
        # Order items keep their own name and price snapshot
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        repo.discard(product)
