import re

from campus_cms.domain.exceptions import InvariantViolation

SLUG_PATTERN = re.compile(r"^[a-z0-9-]+$")
MAX_NAME_LENGTH = 200
MAX_SLUG_LENGTH = 200


def normalize_slug(slug) -> str:
    if not isinstance(slug, str):
        raise InvariantViolation("Slug is required")
    return slug.strip().lower()


def assert_page_name(name) -> None:
    if not isinstance(name, str) or not name.strip():
        raise InvariantViolation("Page name is required")

    if len(name.strip()) > MAX_NAME_LENGTH:
        raise InvariantViolation(
            f"Page name must be at most {MAX_NAME_LENGTH} characters"
        )


def assert_slug(slug: str) -> None:
    if not slug:
        raise InvariantViolation("Slug is required")

    if len(slug) > MAX_SLUG_LENGTH:
        raise InvariantViolation(
            f"Slug must be at most {MAX_SLUG_LENGTH} characters"
        )

    if not SLUG_PATTERN.match(slug):
        raise InvariantViolation(
            "Slug must contain only lowercase letters, numbers, and hyphens"
        )


def assert_page(page) -> None:
    assert_page_name(page.name)
    assert_slug(page.slug)

    if page.version_counter < 1:
        raise InvariantViolation("Page must have at least one version")
