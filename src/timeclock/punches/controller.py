from __future__ import annotations

from flask import Flask, Response, request, session

from ..common.datetime_utils import parse_iso_datetime
from ..common.http import fail, fail_from, json_body, login_required, ok
from ..container import Container
from ..core.constants import HISTORY_RANGE_DAYS
from ..core.exceptions import DomainError, ValidationError


def _status_payload(status) -> dict:
    return {
        "isClockedIn": status.is_clocked_in,
        "clockInTime": status.clock_in_time.isoformat() if status.clock_in_time else None,
        "lastPunch": status.last_punch.to_public() if status.last_punch else None,
    }


def register(app: Flask, container: Container) -> None:
    punches = container.punch_service

    @app.route("/api/kiosk/workers/<worker_id>/status", methods=["GET"], endpoint="kiosk_status")
    def kiosk_status(worker_id: str):
        try:
            return ok(**_status_payload(punches.get_worker_status(worker_id)))
        except DomainError as e:
            return fail_from(e)

    @app.route("/api/kiosk/clock-in", methods=["POST"], endpoint="kiosk_clock_in")
    def kiosk_clock_in():
        try:
            data = json_body()
            worker_id = str(data.get("worker_id") or "").strip()
            if not worker_id:
                raise ValidationError("worker_id is required.")
            punch = punches.clock_in(worker_id)
        except DomainError as e:
            return fail_from(e)
        except Exception:
            app.logger.exception("clock in failed")
            return fail("Failed to clock in. Please try again.", status=500)
        return ok(punch=punch.to_public())

    @app.route("/api/kiosk/clock-out", methods=["POST"], endpoint="kiosk_clock_out")
    def kiosk_clock_out():
        try:
            data = json_body()
            worker_id = str(data.get("worker_id") or "").strip()
            if not worker_id:
                raise ValidationError("worker_id is required.")

            raw = data.get("clock_in_time")
            try:
                last_clock_in = parse_iso_datetime(str(raw)) if raw else None
            except ValueError:
                raise ValidationError("clock_in_time must be an ISO-8601 timestamp.")

            result = punches.clock_out(worker_id, last_clock_in)
        except DomainError as e:
            return fail_from(e)
        except Exception:
            app.logger.exception("clock out failed")
            return fail("Failed to clock out. Please try again.", status=500)

        return ok(
            punch=result.punch.to_public(),
            timeWorked=result.time_worked,
            timeWorkedMs=result.time_worked_ms,
        )

    @app.route("/api/me/status", methods=["GET"], endpoint="my_status")
    @login_required
    def my_status():
        try:
            return ok(**_status_payload(punches.get_worker_status(session["worker_id"])))
        except DomainError as e:
            return fail_from(e)

    @app.route("/api/me/hours/week", methods=["GET"], endpoint="my_weekly_hours")
    @login_required
    def my_weekly_hours():
        try:
            weekly = punches.get_weekly_hours(session["worker_id"])
        except DomainError as e:
            return fail_from(e)
        return ok(**weekly.to_public())

    @app.route("/api/me/punches", methods=["GET"], endpoint="my_punches")
    @login_required
    def my_punches():
        try:
            history = punches.get_history_for_range(session["worker_id"], request.args.get("range", "week"))
        except DomainError as e:
            return fail_from(e)
        return ok(history=[p.to_public() for p in history])

    @app.route("/api/me/punches.csv", methods=["GET"], endpoint="my_punches_csv")
    @login_required
    def my_punches_csv():
        range_name = request.args.get("range", "week")
        days = HISTORY_RANGE_DAYS.get(range_name)
        if days is None:
            return fail("Range must be one of: " + ", ".join(HISTORY_RANGE_DAYS))
        try:
            body = punches.export_history_csv(session["worker_id"], days)
        except DomainError as e:
            return fail_from(e)

        return Response(
            body,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename=punch_history_{range_name}.csv"},
        )
