"""BDD tests for order placement."""

from protean.utils.globals import current_domain
from pytest_bdd import parsers, scenarios, then, when
from storefront.ordering.order.order import Order

scenarios("features/order_placement.feature")


@when(
    parsers.cfparse(
        'an order is placed for {first_qty:d} "{first}" and {second_qty:d} "{second}" totalling "{total}"'
    )
)
def place_two_lines(submit_order, first_qty, first, second_qty, second, total):
    submit_order([(first, first_qty), (second, second_qty)], total)


@when("an order is placed with no items")
def place_nothing(submit_order):
    submit_order([], "10.00")


@then(parsers.cfparse('the order total is "{total}" with {count:d} items'))
def order_total(context, total, count):
    assert context["error"] is None
    stored = current_domain.repository_for(Order).get(context["order"].id)
    assert stored.total == total
    assert len(stored.items) == count
