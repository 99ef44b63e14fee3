"""EmailAddress value object for validated email addresses."""

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import String

from storefront.domain import storefront

_FORBIDDEN = (";", ",", "(", ")", '"', ":", "<", ">", "[", "]", "\\")


@storefront.value_object
class EmailAddress:
    """A structurally valid email address.

    Exactly one @, non-empty local and domain parts, a dotted domain, no
    whitespace, no consecutive dots and none of the characters that would
    break a mail header. Used for account emails and order contact emails.
    """

    address: String(required=True, max_length=254)

    @invariant.post
    def verify_email_address(self):
        email = self.address
        error = ValidationError({"email": [f"Invalid email address: {email!r}"]})

        if any(ch.isspace() for ch in email):
            raise error

        if email.count("@") != 1:
            raise error

        local_part, domain_part = email.split("@", 1)

        if not local_part or local_part.startswith(".") or local_part.endswith("."):
            raise error

        if not domain_part or domain_part.startswith(".") or domain_part.endswith("."):
            raise error

        if "." not in domain_part:
            raise error

        for label in domain_part.split("."):
            if label.startswith("-") or label.endswith("-"):
                raise error

        if ".." in local_part or ".." in domain_part:
            raise error

        if any(ch in email for ch in _FORBIDDEN):
            raise error


def normalize_email(address: str) -> str:
    """Validate an address and return its canonical lowercase form."""
    canonical = (address or "").strip().lower()
    return EmailAddress(address=canonical).address
