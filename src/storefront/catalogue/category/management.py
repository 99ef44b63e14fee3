"""Category management: commands and handler."""

from protean import handle
from protean.fields import Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from storefront.catalogue.category.category import Category
from storefront.domain import storefront
from storefront.errors import ConflictError


@storefront.command(part_of="Category")
class CreateCategory:
    name: String(required=True, max_length=100)
    slug: String(required=True, max_length=120)
    description: Text()
    image_url: String(max_length=500)
    display_order: Integer(default=0)


@storefront.command(part_of="Category")
class UpdateCategory:
    category_id: Identifier(required=True)
    name: String(max_length=100)
    slug: String(max_length=120)
    description: Text()
    image_url: String(max_length=500)
    display_order: Integer()


@storefront.command(part_of="Category")
class DeleteCategory:
    category_id: Identifier(required=True)


def _ensure_unique(repo, name=None, slug=None, exclude_id=None):
    if slug is not None:
        existing = repo.by_slug(slug)
        if existing and str(existing.id) != str(exclude_id):
            raise ConflictError(f"A category with slug '{slug}' already exists")
    if name is not None:
        existing = repo.by_name(name)
        if existing and str(existing.id) != str(exclude_id):
            raise ConflictError(f"A category named '{name}' already exists")


@storefront.command_handler(part_of=Category)
class ManageCategoryHandler:
    @handle(CreateCategory)
    def create_category(self, command):
        repo = current_domain.repository_for(Category)
        _ensure_unique(repo, name=command.name, slug=command.slug)

        category = Category.create(
            name=command.name,
            slug=command.slug,
            description=command.description,
            image_url=command.image_url,
            display_order=command.display_order,
        )
        repo.add(category)
        return category

    @handle(UpdateCategory)
    def update_category(self, command):
        repo = current_domain.repository_for(Category)
        category = repo.get(command.category_id)
        _ensure_unique(repo, name=command.name, slug=command.slug, exclude_id=category.id)

        category.update_details(
            name=command.name,
            slug=command.slug,
            description=command.description,
            image_url=command.image_url,
            display_order=command.display_order,
        )
        repo.add(category)
        return category

    @handle(DeleteCategory)
    def delete_category(self, command):
        # Products keep their category_id; it simply stops resolving
        repo = current_domain.repository_for(Category)
        category = repo.get(command.category_id)
        repo.discard(category)
