"""Trusted caller identity taken from request headers.

The identity provider sits in front of this service and forwards the caller's
id and role. Nothing here verifies credentials.
"""

from rest_framework.authentication import BaseAuthentication
from rest_framework.exceptions import AuthenticationFailed
from rest_framework.request import Request

from events.domain import Caller, Role

CALLER_ID_HEADER = "HTTP_X_CALLER_ID"
CALLER_ROLE_HEADER = "HTTP_X_CALLER_ROLE"


class CallerHeaderAuthentication(BaseAuthentication):
    """Sets ``request.user`` to a Caller built from X-Caller-Id / X-Caller-Role."""

    def authenticate(self, request: Request) -> tuple[Caller, None] | None:
        caller_id = request.META.get(CALLER_ID_HEADER, "").strip()
        role = request.META.get(CALLER_ROLE_HEADER, "").strip().lower()
        if not caller_id and not role:
            return None
        if not caller_id:
            raise AuthenticationFailed("X-Caller-Id header is required")
        try:
            return Caller(id=caller_id, role=Role(role)), None
        except ValueError:
            raise AuthenticationFailed(f"Unknown role '{role}'")

    def authenticate_header(self, request: Request) -> str:
        return "X-Caller-Id"
