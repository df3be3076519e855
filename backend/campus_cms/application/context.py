# campus_cms/application/context.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional

from campus_cms.domain.exceptions import Unauthenticated


class Role(str, Enum):
    SUPER_ADMIN = "super-admin"
    EDITOR = "editor"
    VIEWER = "viewer"


EDITOR_ROLES = (Role.SUPER_ADMIN, Role.EDITOR)


@dataclass(frozen=True)
class TenantContext:
    """
    The authenticated actor every core operation runs as.

    All tenant scoping reads `institution_id` from here, never from
    request input. Instances are immutable.
    """
    institution_id: str
    user_id: str
    role: Role

    @classmethod
    def from_claims(
        cls,
        identity: Optional[str],
        claims: Optional[Mapping[str, Any]],
    ) -> "TenantContext":
        """
        Build a context from an already-verified token.

        identity: the token subject (user id)
        claims: the decoded token body carrying institution_id and role
        """
        if not identity or not claims:
            raise Unauthenticated()

        institution_id = claims.get("institution_id")
        if not institution_id:
            raise Unauthenticated("Token carries no institution")

        try:
            role = Role(claims.get("role"))
        except ValueError as exc:
            raise Unauthenticated("Token carries no valid role") from exc

        return cls(
            institution_id=str(institution_id),
            user_id=str(identity),
            role=role,
        )
