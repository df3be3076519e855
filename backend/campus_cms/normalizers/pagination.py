# campus_cms/normalizers/pagination.py
from typing import Callable, Any, List, Optional, Dict

from campus_cms.utils.pagination import CursorMeta


def normalize_pagination(
    items: List[Any],
    normalize_fn: Callable[[Any], Dict[str, Any]],
    *,
    cursor: Optional[CursorMeta] = None,
    page: Optional[int] = None,
    per_page: Optional[int] = None,
    total: Optional[int] = None,
) -> Dict[str, Any]:
    """
    Wrap a listing as {"items": [...], "pagination": {...}}.

    Pass `cursor` for the audit trail, or `page`/`per_page`/`total` for
    page listings; never both.
    """
    if cursor is not None:
        meta: Dict[str, Any] = dict(cursor)
    elif page is not None and per_page is not None:
        meta = {"page": page, "per_page": per_page}
        if total is not None:
            meta["total"] = total
            meta["total_pages"] = -(-total // per_page)
    else:
        meta = {}

    return {
        "items": [normalize_fn(item) for item in items],
        "pagination": meta,
    }
