"""Shared BDD fixtures and step definitions for ordering."""

import json

import pytest
from protean.utils.globals import current_domain
from pytest_bdd import given, parsers, then
from storefront.catalogue.product.management import CreateProduct
from storefront.catalogue.product.product import Product
from storefront.ordering.order.order import Order
from storefront.ordering.order.placement import PlaceOrder

ADDRESS = {
    "line1": "12 MG Road",
    "line2": None,
    "city": "Bengaluru",
    "state": "KA",
    "postal_code": "560001",
    "country": "IN",
}


@pytest.fixture()
def context():
    """Scenario state: products by name, the current order and any captured error."""
    return {"products": {}, "order": None, "error": None}


@pytest.fixture()
def submit_order(context):
    """Place an order for ``[(product name, quantity), ...]``, capturing errors."""

    def _submit(lines, total):
        items = []
        for name, quantity in lines:
            product = context["products"][name]
            items.append(
                {
                    "product_id": str(product.id),
                    "product_name": name,
                    "product_price": product.price,
                    "quantity": quantity,
                }
            )
        try:
            context["order"] = current_domain.process(
                PlaceOrder(
                    customer_email="asha@example.com",
                    customer_name="Asha Rai",
                    shipping_address=json.dumps(ADDRESS),
                    total=total,
                    items=json.dumps(items),
                ),
                asynchronous=False,
            )
        except Exception as exc:  # noqa: BLE001
            context["error"] = exc

    return _submit


@given(parsers.cfparse('a product "{name}" priced "{price}" with {stock:d} in stock'))
def product_in_stock(context, name, price, stock):
    slug = name.lower().replace(" ", "-")
    context["products"][name] = current_domain.process(
        CreateProduct(
            name=name,
            slug=slug,
            description=f"{name} from the Rai Aura collection",
            price=price,
            category_id="cat-default",
            images=json.dumps([f"/images/products/{slug}.jpg"]),
            stock=stock,
        ),
        asynchronous=False,
    )


@given(parsers.cfparse('an order for {quantity:d} "{name}" totalling "{total}"'))
def existing_order(context, submit_order, quantity, name, total):
    submit_order([(name, quantity)], total)
    assert context["error"] is None


@then(parsers.cfparse('"{name}" has {stock:d} left in stock'))
def stock_left(context, name, stock):
    product = current_domain.repository_for(Product).get(context["products"][name].id)
    assert product.stock == stock


@then(parsers.cfparse("there are {count:d} orders"))
def order_count(count):
    assert len(current_domain.repository_for(Order).all_orders()) == count


@then(parsers.cfparse('the request is refused mentioning "{text}"'))
def refused(context, text):
    assert context["error"] is not None
    assert text in str(getattr(context["error"], "messages", context["error"]))
