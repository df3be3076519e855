from functools import wraps
from flask import g
from flask_jwt_extended import get_jwt, get_jwt_identity, verify_jwt_in_request
from campus_cms.application.context import Role, TenantContext
from campus_cms.domain.exceptions import Forbidden


def tenant_required(fn):
    """
    Verify the bearer token and expose the actor as g.tenant_context.

    The institution comes from the signed token only; nothing the client
    sends in the body, query or headers can change it.
    """
    @wraps(fn)
    def wrapper(*args, **kwargs):
        verify_jwt_in_request()
        g.tenant_context = TenantContext.from_claims(get_jwt_identity(), get_jwt())
        return fn(*args, **kwargs)
    return wrapper

def roles_required(*allowed_roles: Role):
    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            ctx: TenantContext = g.tenant_context

            if ctx.role not in allowed_roles:
                raise Forbidden()

            return fn(*args, **kwargs)
        return wrapper
    return decorator
