import pytest

ADDRESS = {
    "line1": "12 MG Road",
    "line2": None,
    "city": "Bengaluru",
    "state": "KA",
    "postal_code": "560001",
    "country": "IN",
}


@pytest.fixture()
def address():
    return dict(ADDRESS)


def _line(product, quantity=1, price=None):
    return {
        "product_id": str(product.id),
        "product_name": product.name,
        "product_price": price or product.price,
        "quantity": quantity,
    }


@pytest.fixture()
def line():
    """Build an order line snapshot for a product."""
    return _line
