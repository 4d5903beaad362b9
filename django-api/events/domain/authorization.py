"""Role policy for mutating operations.

Every service method that changes state calls ``authorize`` before touching
the store. Reads are open to every role.
"""

from enum import Enum

from events.domain.errors import PermissionDeniedError
from events.domain.models import Caller, Role


class Operation(str, Enum):
    """Mutating operations guarded by the role policy."""

    CREATE_EVENT = "create_event"
    ADVANCE_STATUS = "advance_status"
    REGISTER = "register"
    CANCEL_REGISTRATION = "cancel_registration"
    ADD_FEEDBACK = "add_feedback"


POLICY: dict[Operation, frozenset[Role]] = {
    Operation.CREATE_EVENT: frozenset({Role.ADMIN, Role.HOST}),
    Operation.ADVANCE_STATUS: frozenset({Role.ADMIN, Role.HOST}),
    Operation.REGISTER: frozenset({Role.STUDENT, Role.ADMIN}),
    Operation.CANCEL_REGISTRATION: frozenset({Role.STUDENT, Role.ADMIN}),
    Operation.ADD_FEEDBACK: frozenset({Role.STUDENT, Role.ADMIN}),
}


def is_allowed(role: Role, operation: Operation) -> bool:
    return role in POLICY.get(operation, frozenset())


def authorize(role: Role, operation: Operation) -> None:
    """Raise PermissionDeniedError unless ``role`` may perform ``operation``."""
    if not is_allowed(role, operation):
        raise PermissionDeniedError(role=Role(role).value, operation=operation.value)


def authorize_for_student(caller: Caller, operation: Operation, student_id: str) -> None:
    """Authorize an operation performed on behalf of ``student_id``.

    Students act only for themselves. Admins may act for anyone.
    """
    authorize(caller.role, operation)
    if caller.role == Role.STUDENT and caller.id != student_id:
        raise PermissionDeniedError(role=caller.role.value, operation=operation.value)
