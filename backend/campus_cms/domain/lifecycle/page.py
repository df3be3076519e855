from typing import Set

from campus_cms.domain.exceptions import InvalidState

DRAFT = "draft"
PUBLISHED = "published"

# Explicit allowed state transitions. Re-entering the current state is
# always allowed and is a no-op.
ALLOWED_PAGE_TRANSITIONS: dict[str, Set[str]] = {
    DRAFT: {PUBLISHED},
    PUBLISHED: {DRAFT},
}


def visibility_of(is_published: bool) -> str:
    return PUBLISHED if is_published else DRAFT


def assert_page_transition(*, from_status: str, to_status: str) -> bool:
    """
    Guards page visibility transitions.

    Returns True when the transition changes state, False when the page is
    already in `to_status`.
    """
    if from_status == to_status:
        return False

    allowed = ALLOWED_PAGE_TRANSITIONS.get(from_status, set())

    if to_status not in allowed:
        raise InvalidState(
            f"Illegal page transition: {from_status} → {to_status}"
        )

    return True
