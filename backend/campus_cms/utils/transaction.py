from contextlib import contextmanager
from flask import current_app
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm.exc import ObjectDeletedError, StaleDataError
from campus_cms.extensions import db
from campus_cms.domain.exceptions import Conflict, NotFound, StorageUnavailable


@contextmanager
def storage_errors(*, conflict: str = "Resource conflict", not_found: str = "Resource not found"):
    """
    Translate SQLAlchemy exceptions raised inside the block into CMS errors.

    IntegrityError means a unique constraint fired (slug, version number).
    StaleDataError / ObjectDeletedError mean the row vanished under us,
    typically a concurrent delete that committed first.
    """
    try:
        yield
    except IntegrityError as exc:
        raise Conflict(conflict) from exc
    except (StaleDataError, ObjectDeletedError) as exc:
        raise NotFound(not_found) from exc
    except SQLAlchemyError as exc:
        current_app.logger.error("Storage failure: %s", exc)
        raise StorageUnavailable() from exc


@contextmanager
def transactional(**messages):
    """Context manager for database transactions."""
    try:
        with storage_errors(**messages):
            yield
            db.session.commit()
    except Exception:
        db.session.rollback()
        raise
