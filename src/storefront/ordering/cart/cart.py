"""Cart line aggregate.

A cart is the set of CartItems sharing one owner: a signed-in user
(``user_id``) or an anonymous browser session (``session_id``). Adding a
product the owner already has increments that line instead of creating a
second one.
"""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Identifier, Integer, String

from storefront.domain import storefront


def require_owner(user_id=None, session_id=None) -> None:
    if not user_id and not session_id:
        raise ValidationError({"owner": ["userId or sessionId is required"]})


@storefront.aggregate
class CartItem:
    user_id = Identifier()
    session_id = String(max_length=255)
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)
    created_at = DateTime()

    @invariant.post
    def must_have_exactly_one_owner(self):
        if bool(self.user_id) == bool(self.session_id):
            raise ValidationError({"owner": ["A cart item belongs to exactly one of userId or sessionId"]})

    @classmethod
    def create(cls, product_id, quantity=1, user_id=None, session_id=None):
        require_owner(user_id, session_id)
        return cls(
            user_id=user_id,
            session_id=session_id,
            product_id=product_id,
            quantity=quantity,
            created_at=datetime.now(UTC),
        )

    def increase(self, quantity: int) -> None:
        if quantity < 1:
            raise ValidationError({"quantity": ["Quantity must be at least 1"]})
        self.quantity += quantity

    def set_quantity(self, quantity: int) -> None:
        if quantity is None or quantity < 1:
            raise ValidationError({"quantity": ["Quantity must be at least 1"]})
        self.quantity = quantity
