"""URL-safe slug rules shared by products and categories."""

import re

from protean.exceptions import ValidationError

_SLUG_PATTERN = re.compile(r"^[a-z0-9-]+$")


def check_slug(slug: str) -> None:
    """Raise ValidationError unless the slug is lowercase, hyphenated and URL-safe."""
    if not slug:
        return

    if not _SLUG_PATTERN.match(slug):
        raise ValidationError({"slug": ["Slug must contain only lowercase alphanumeric characters and hyphens"]})

    if slug.startswith("-") or slug.endswith("-"):
        raise ValidationError({"slug": ["Slug must not start or end with a hyphen"]})

    if "--" in slug:
        raise ValidationError({"slug": ["Slug must not contain consecutive hyphens"]})
