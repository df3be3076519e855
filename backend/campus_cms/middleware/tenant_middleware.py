from flask import request, g
from campus_cms.application.public.gate import find_institution
from campus_cms.domain.exceptions import InvariantViolation
from campus_cms.utils.transaction import storage_errors

MAX_INSTITUTION_ID_LENGTH = 36


def public_tenant_middleware(bp):
    """
    Resolve the institution for anonymous requests on `bp`.

    Public callers have no token, so the tenant is an explicit
    `institutionId` query parameter, validated against known institutions.
    """
    @bp.before_request
    def load_institution():
        institution_id = (request.args.get("institutionId") or "").strip()
        if not institution_id:
            raise InvariantViolation("institutionId query parameter is missing")

        if len(institution_id) > MAX_INSTITUTION_ID_LENGTH:
            raise InvariantViolation("Invalid institution ID")

        with storage_errors():
            # Attach institution to request context
            g.public_institution = find_institution(institution_id)
