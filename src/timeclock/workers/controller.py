from __future__ import annotations

from flask import Flask, request, session

from ..common.http import fail, fail_from, json_body, login_required, ok, reviewer_required
from ..container import Container
from ..core.exceptions import AuthorizationError, DomainError


def register(app: Flask, container: Container) -> None:
    def _create_worker_from_body():
        data = json_body()
        worker = container.worker_service.create_worker(
            pin=str(data.get("pin", "")),
            full_name=str(data.get("full_name", "")),
            role=data.get("role") or "worker",
            email=data.get("email"),
            phone=data.get("phone"),
        )
        return ok(201, worker=worker.to_public())

    @app.route("/api/kiosk/authenticate", methods=["POST"], endpoint="kiosk_authenticate")
    def kiosk_authenticate():
        try:
            data = json_body()
            result = container.auth_service.authenticate_worker(str(data.get("pin", "")))
        except DomainError as e:
            return fail_from(e)
        except Exception:
            app.logger.exception("kiosk authentication failed")
            return fail("Something went wrong. Please try again.", status=500)

        session["kiosk_admin"] = result.is_admin
        return ok(worker=result.worker.to_public(), isAdmin=result.is_admin)

    @app.route("/api/kiosk/workers", methods=["POST"], endpoint="kiosk_create_worker")
    def kiosk_create_worker():
        if not session.get("kiosk_admin"):
            return fail_from(AuthorizationError("Administrator PIN required."))
        try:
            return _create_worker_from_body()
        except DomainError as e:
            return fail_from(e)
        except Exception:
            app.logger.exception("create worker failed")
            return fail("Failed to create worker. Please try again.", status=500)

    @app.route("/api/manager/workers", methods=["GET"], endpoint="manager_list_workers")
    @reviewer_required
    def manager_list_workers():
        include_inactive = request.args.get("include_inactive", "0") in {"1", "true", "yes"}
        try:
            workers = container.worker_service.list_workers(include_inactive=include_inactive)
        except DomainError as e:
            return fail_from(e)
        return ok(workers=[w.to_public() for w in workers])

    @app.route("/api/manager/workers", methods=["POST"], endpoint="manager_create_worker")
    @reviewer_required
    def manager_create_worker():
        try:
            return _create_worker_from_body()
        except DomainError as e:
            return fail_from(e)
        except Exception:
            app.logger.exception("create worker failed")
            return fail("Failed to create worker. Please try again.", status=500)

    @app.route("/api/manager/workers/<worker_id>/deactivate", methods=["POST"], endpoint="manager_deactivate_worker")
    @reviewer_required
    def manager_deactivate_worker(worker_id: str):
        if worker_id == session.get("worker_id"):
            return fail("You cannot deactivate yourself.", status=400)
        try:
            container.worker_service.deactivate_worker(worker_id)
        except DomainError as e:
            return fail_from(e)
        return ok()

    @app.route("/api/me", methods=["GET"], endpoint="my_profile")
    @login_required
    def my_profile():
        try:
            worker = container.worker_service.get_worker(session["worker_id"])
        except DomainError as e:
            return fail_from(e)
        return ok(worker=worker.to_public())

    @app.route("/api/me/contact", methods=["PUT"], endpoint="my_contact")
    @login_required
    def my_contact():
        try:
            data = json_body()
            worker = container.worker_service.update_contact(
                session["worker_id"],
                email=data.get("email"),
                phone=data.get("phone"),
            )
        except DomainError as e:
            return fail_from(e)
        return ok(worker=worker.to_public())
