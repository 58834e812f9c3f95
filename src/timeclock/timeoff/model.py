from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import RequestStatus, TimeOffType


@dataclass(frozen=True)
class NewTimeOffRequest:
    type: TimeOffType
    start_date: date
    end_date: date
    paid_hours: float
    unpaid_hours: float
    comments: Optional[str] = None


@dataclass(frozen=True)
class TimeOffRequest:
    request_id: str
    worker_id: str
    type: TimeOffType
    start_date: date
    end_date: date
    paid_hours: float
    unpaid_hours: float
    is_excused: bool
    is_planned: bool
    comments: Optional[str]
    status: RequestStatus
    created_at: datetime
    updated_at: datetime
    reviewed_by: Optional[str] = None
    reviewed_at: Optional[datetime] = None
    denial_reason: Optional[str] = None
    worker_name: Optional[str] = None
    reviewer_name: Optional[str] = None

    def to_public(self) -> dict:
        return {
            "id": self.request_id,
            "worker_id": self.worker_id,
            "worker_name": self.worker_name,
            "type": self.type.value,
            "start_date": self.start_date.isoformat(),
            "end_date": self.end_date.isoformat(),
            "paid_hours": self.paid_hours,
            "unpaid_hours": self.unpaid_hours,
            "is_excused": self.is_excused,
            "is_planned": self.is_planned,
            "comments": self.comments,
            "status": self.status.value,
            "reviewed_by": self.reviewed_by,
            "reviewer_name": self.reviewer_name,
            "reviewed_at": self.reviewed_at.isoformat() if self.reviewed_at else None,
            "denial_reason": self.denial_reason,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }
