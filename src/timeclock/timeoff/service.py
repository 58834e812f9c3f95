from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Callable, Mapping, Optional, Sequence, TypeVar

from ..common.datetime_utils import now_utc
from ..common.validators import require_non_negative
from ..core.constants import ALL_REQUESTS_LIMIT, DEMO_ID_PREFIX
from ..core.enums import FallbackPolicy, RequestStatus, TimeOffType
from ..core.exceptions import StoreError, ValidationError
from .model import NewTimeOffRequest, TimeOffRequest
from .repository import TimeOffRepository

logger = logging.getLogger(__name__)

T = TypeVar("T")

SUBMIT = "submit"
LIST_MINE = "list_mine"
LIST_PENDING = "list_pending"
LIST_ALL = "list_all"
APPROVE = "approve"
DENY = "deny"

# Time-off screens are secondary views: keep them showing something when the
# database is unreachable.
DEFAULT_POLICIES: Mapping[str, FallbackPolicy] = {
    SUBMIT: FallbackPolicy.DEGRADE,
    LIST_MINE: FallbackPolicy.DEGRADE,
    LIST_PENDING: FallbackPolicy.DEGRADE,
    LIST_ALL: FallbackPolicy.DEGRADE,
    APPROVE: FallbackPolicy.DEGRADE,
    DENY: FallbackPolicy.DEGRADE,
}


class TimeOffService:
    """Use case: workers request time off, reviewers approve or deny.

    Every operation runs against the primary repository. When that raises
    StoreError and the operation's policy is DEGRADE, the failure is logged and
    the same operation is served by the in-memory fallback repository instead.
    Validation errors are raised before either store is touched and are never
    masked.
    """

    def __init__(
        self,
        requests: TimeOffRepository,
        fallback: TimeOffRepository,
        *,
        policies: Optional[Mapping[str, FallbackPolicy]] = None,
    ):
        self._requests = requests
        self._fallback = fallback
        self._policies = dict(DEFAULT_POLICIES)
        if policies:
            self._policies.update(policies)

    def _run(self, operation: str, action: Callable[[TimeOffRepository], T]) -> T:
        try:
            return action(self._requests)
        except StoreError as exc:
            if self._policies.get(operation) != FallbackPolicy.DEGRADE or self._requests is self._fallback:
                raise
            logger.warning("time-off %s failed on primary store, using fallback: %s", operation, exc)
            return action(self._fallback)

    @staticmethod
    def _validate(
        *,
        type: TimeOffType | str,
        start_date: date,
        end_date: date,
        paid_hours,
        unpaid_hours,
        comments: Optional[str],
    ) -> NewTimeOffRequest:
        try:
            kind = TimeOffType(type)
        except ValueError:
            raise ValidationError("Time off type is not valid.")

        if not isinstance(start_date, date) or not isinstance(end_date, date):
            raise ValidationError("Start and end dates are required.")
        if end_date < start_date:
            raise ValidationError("End date must be on or after the start date.")

        return NewTimeOffRequest(
            type=kind,
            start_date=start_date,
            end_date=end_date,
            paid_hours=require_non_negative(paid_hours, "Paid hours"),
            unpaid_hours=require_non_negative(unpaid_hours, "Unpaid hours"),
            comments=(comments or "").strip() or None,
        )

    def submit_request(
        self,
        worker_id: str,
        *,
        type: TimeOffType | str,
        start_date: date,
        end_date: date,
        paid_hours=0,
        unpaid_hours=0,
        comments: Optional[str] = None,
        now: datetime | None = None,
    ) -> TimeOffRequest:
        data = self._validate(
            type=type,
            start_date=start_date,
            end_date=end_date,
            paid_hours=paid_hours,
            unpaid_hours=unpaid_hours,
            comments=comments,
        )
        now = now or now_utc()
        req = self._run(SUBMIT, lambda repo: repo.create_request(worker_id=worker_id, data=data, now=now))
        logger.info("time-off request %s submitted by %s", req.request_id, worker_id)
        return req

    def list_mine(self, worker_id: str) -> Sequence[TimeOffRequest]:
        return self._run(LIST_MINE, lambda repo: repo.list_requests(worker_id=worker_id))

    def list_pending(self) -> Sequence[TimeOffRequest]:
        return self._run(LIST_PENDING, lambda repo: repo.list_requests(status=RequestStatus.PENDING, oldest_first=True))

    def list_all(self) -> Sequence[TimeOffRequest]:
        return self._run(LIST_ALL, lambda repo: repo.list_requests(limit=ALL_REQUESTS_LIMIT))

    @staticmethod
    def _decide(repo: TimeOffRepository, *, request_id: str, status: RequestStatus, reviewer_id: str, now: datetime, reason: Optional[str]) -> bool:
        return repo.decide(
            request_id=request_id,
            status=status,
            reviewed_by=reviewer_id,
            reviewed_at=now,
            denial_reason=reason,
        )

    def _review(self, operation: str, request_id: str, status: RequestStatus, reviewer_id: str, reason: Optional[str], now: datetime | None) -> None:
        """Apply a decision to a pending request.

        Reviews never fail outward. A request that is unknown or already
        decided is left untouched and the review is acknowledged.
        """
        now = now or now_utc()

        def action(repo: TimeOffRepository) -> bool:
            return self._decide(repo, request_id=request_id, status=status, reviewer_id=reviewer_id, now=now, reason=reason)

        # Ids minted by the fallback store never exist in the database.
        if request_id.startswith(DEMO_ID_PREFIX):
            applied = action(self._fallback)
        else:
            applied = self._run(operation, action)

        if not applied:
            logger.warning("time-off %s for %s ignored: request is unknown or no longer pending", operation, request_id)
            return

        logger.info("time-off request %s %s by %s", request_id, status.value, reviewer_id)

    def approve(self, request_id: str, reviewer_id: str, *, now: datetime | None = None) -> None:
        self._review(APPROVE, request_id, RequestStatus.APPROVED, reviewer_id, None, now)

    def deny(self, request_id: str, reviewer_id: str, reason: Optional[str] = None, *, now: datetime | None = None) -> None:
        self._review(DENY, request_id, RequestStatus.DENIED, reviewer_id, (reason or "").strip() or None, now)
