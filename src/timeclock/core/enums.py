from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Worker roles used for authorization."""

    WORKER = "worker"
    SUPERVISOR = "supervisor"
    MANAGER = "manager"
    ADMIN = "admin"

    @property
    def can_review(self) -> bool:
        return self in {Role.SUPERVISOR, Role.MANAGER, Role.ADMIN}


class PunchType(str, Enum):
    IN = "IN"
    OUT = "OUT"


class TimeOffType(str, Enum):
    VACATION = "vacation"
    PERSONAL = "personal"
    SICK = "sick"
    BEREAVEMENT = "bereavement"
    UNPAID = "unpaid"


class RequestStatus(str, Enum):
    """Time-off approval states. APPROVED and DENIED are terminal."""

    PENDING = "pending"
    APPROVED = "approved"
    DENIED = "denied"


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    FORBIDDEN = "forbidden"
    TRANSIENT = "transient"


class FallbackPolicy(str, Enum):
    """What a service does when the backing store fails on a given call."""

    DEGRADE = "degrade"
    FAIL_LOUD = "fail_loud"
