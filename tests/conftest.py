import os
from pathlib import Path

import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_sessionstart(session):
    """Initialize the storefront domain once, before collection.

    The active overlay in domain.toml is selected with ``--env`` (default
    ``test``: in-memory store, synchronous event handlers).
    """
    os.environ["PROTEAN_ENV"] = session.config.option.env
    # Always exercise the in-memory email and payment adapters
    os.environ.pop("RESEND_API_KEY", None)
    os.environ.pop("STRIPE_SECRET_KEY", None)

    import storefront.elements  # noqa: F401
    from storefront.domain import storefront

    storefront.init()


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = str(Path(item.fspath))

        if "/domain/" in test_path:
            item.add_marker(pytest.mark.domain)
        elif "/application/" in test_path:
            item.add_marker(pytest.mark.application)
        elif "/bdd/" in test_path:
            item.add_marker(pytest.mark.bdd)
        elif "/integration/" in test_path:
            item.add_marker(pytest.mark.integration)
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)


@pytest.fixture(autouse=True)
def run_around_tests():
    """Push the domain context before each test, reset all in-memory state after."""
    from storefront.domain import storefront
    from storefront.notifications.channel import reset_email_channel
    from storefront.payments.gateway import reset_gateway

    ctx = storefront.domain_context()
    ctx.push()

    yield

    for _, provider in storefront.providers.items():
        provider._data_reset()
    storefront.event_store.store._data_reset()

    reset_email_channel()
    reset_gateway()
    ctx.pop()


@pytest.fixture()
def outbox():
    """The fake email adapter that order notifications are sent through."""
    from storefront.notifications.channel import get_email_channel

    return get_email_channel()


@pytest.fixture()
def client():
    """HTTP client over the full storefront app."""
    from fastapi.testclient import TestClient
    from storefront.web import create_app

    return TestClient(create_app())


@pytest.fixture()
def make_product():
    """Create a catalogue product and return it."""
    import json

    from protean.utils.globals import current_domain
    from storefront.catalogue.product.management import CreateProduct

    def _make(name="Golden Ring", price="89.99", stock=10, slug=None):
        slug = slug or name.lower().replace(" ", "-")
        return current_domain.process(
            CreateProduct(
                name=name,
                slug=slug,
                description=f"{name} from the Rai Aura collection",
                price=price,
                category_id="cat-ring",
                images=json.dumps([f"/images/products/{slug}.jpg"]),
                stock=stock,
            ),
            asynchronous=False,
        )

    return _make
