"""Tests for the Category aggregate root."""

import pytest
from protean.exceptions import ValidationError
from protean.utils.reflection import declared_fields
from storefront.catalogue.category.category import Category
from storefront.catalogue.category.events import CategoryCreated, CategoryUpdated


class TestCategoryConstruction:
    def test_element_type(self):
        from protean.utils import DomainObjects

        assert Category.element_type == DomainObjects.AGGREGATE

    def test_declared_fields(self):
        fields = declared_fields(Category)
        for name in ("name", "slug", "description", "image_url", "display_order"):
            assert name in fields

    def test_create(self):
        category = Category.create(name="Ring", slug="ring", description="Exquisite rings")
        assert category.name == "Ring"
        assert category.slug == "ring"
        assert category.display_order == 0
        assert category.image_url is None

    def test_create_raises_event(self):
        category = Category.create(name="Ring", slug="ring", display_order=3)
        assert len(category._events) == 1
        event = category._events[0]
        assert isinstance(event, CategoryCreated)
        assert event.slug == "ring"
        assert event.display_order == 3

    def test_slug_must_be_url_safe(self):
        with pytest.raises(ValidationError) as exc:
            Category.create(name="Ring", slug="Fine Rings")
        assert "slug" in exc.value.messages

    def test_name_is_required(self):
        with pytest.raises(ValidationError):
            Category.create(name=None, slug="ring")


class TestCategoryUpdate:
    def test_partial_update_keeps_other_fields(self):
        category = Category.create(name="Ring", slug="ring", description="Rings", display_order=2)
        category._events.clear()

        category.update_details(name="Rings")

        assert category.name == "Rings"
        assert category.slug == "ring"
        assert category.description == "Rings"
        assert category.display_order == 2
        assert isinstance(category._events[0], CategoryUpdated)

    def test_update_display_order_to_zero(self):
        category = Category.create(name="Ring", slug="ring", display_order=5)
        category.update_details(display_order=0)
        assert category.display_order == 0

    def test_update_rejects_bad_slug(self):
        category = Category.create(name="Ring", slug="ring")
        with pytest.raises(ValidationError):
            category.update_details(slug="ring--gold")
