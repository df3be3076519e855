from datetime import timezone
from dateutil.parser import parse, ParserError
from campus_cms.domain.exceptions import Conflict, InvariantViolation


def normalize_ts(ts):
    """
    Ensure datetime is timezone-aware.
    Defaults to UTC if naive.
    """
    if ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts


def enforce_optimistic_lock(entity, client_ts):
    """
    Enforces an If-Unmodified-Since precondition against entity.updated_at.
    Raises Conflict if the entity has been modified since.

    Without a header the write proceeds as last-write-wins.
    """
    if not client_ts:
        return  # No optimistic lock requested

    try:
        client_ts = normalize_ts(parse(client_ts))
    except (ParserError, OverflowError, ValueError):
        raise InvariantViolation("Invalid If-Unmodified-Since header")

    server_ts = normalize_ts(entity.updated_at)

    # HTTP dates have one-second resolution
    if server_ts.replace(microsecond=0) > client_ts:
        raise Conflict("Conflict detected. Resource has been modified.")
