from __future__ import annotations

from flask import Flask, request, session

from ..common.datetime_utils import parse_iso_date
from ..common.http import fail, fail_from, json_body, login_required, ok, reviewer_required
from ..container import Container
from ..core.exceptions import DomainError, ValidationError


def _date_field(data: dict, name: str):
    value = data.get(name)
    if not value:
        raise ValidationError(f"{name} is required.")
    try:
        return parse_iso_date(str(value))
    except ValueError:
        raise ValidationError(f"{name} must be YYYY-MM-DD.")


def register(app: Flask, container: Container) -> None:
    timeoff = container.timeoff_service

    @app.route("/api/me/time-off", methods=["GET"], endpoint="my_time_off")
    @login_required
    def my_time_off():
        try:
            requests = timeoff.list_mine(session["worker_id"])
        except DomainError as e:
            return fail_from(e)
        return ok(requests=[r.to_public() for r in requests])

    @app.route("/api/me/time-off", methods=["POST"], endpoint="submit_time_off")
    @login_required
    def submit_time_off():
        try:
            data = json_body()
            req = timeoff.submit_request(
                session["worker_id"],
                type=str(data.get("type", "")),
                start_date=_date_field(data, "start_date"),
                end_date=_date_field(data, "end_date"),
                paid_hours=data.get("paid_hours", 0),
                unpaid_hours=data.get("unpaid_hours", 0),
                comments=data.get("comments"),
            )
        except DomainError as e:
            return fail_from(e)
        except Exception:
            app.logger.exception("submit time off failed")
            return fail("Failed to submit request. Please try again.", status=500)
        return ok(201, request=req.to_public())

    @app.route("/api/manager/time-off/pending", methods=["GET"], endpoint="pending_time_off")
    @reviewer_required
    def pending_time_off():
        try:
            requests = timeoff.list_pending()
        except DomainError as e:
            return fail_from(e)
        return ok(requests=[r.to_public() for r in requests])

    @app.route("/api/manager/time-off", methods=["GET"], endpoint="all_time_off")
    @reviewer_required
    def all_time_off():
        try:
            requests = timeoff.list_all()
        except DomainError as e:
            return fail_from(e)
        return ok(requests=[r.to_public() for r in requests])

    @app.route("/api/manager/time-off/<request_id>/approve", methods=["POST"], endpoint="approve_time_off")
    @reviewer_required
    def approve_time_off(request_id: str):
        try:
            timeoff.approve(request_id, session["worker_id"])
        except DomainError as e:
            return fail_from(e)
        return ok()

    @app.route("/api/manager/time-off/<request_id>/deny", methods=["POST"], endpoint="deny_time_off")
    @reviewer_required
    def deny_time_off(request_id: str):
        try:
            data = request.get_json(silent=True)
            # The reason is optional; any body that is not an object carries none.
            reason = str(data.get("reason") or "") if isinstance(data, dict) else None
            timeoff.deny(request_id, session["worker_id"], reason)
        except DomainError as e:
            return fail_from(e)
        return ok()
