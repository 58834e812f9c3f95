from __future__ import annotations

from flask import Flask, session

from ..common.http import fail, fail_from, json_body, ok
from ..container import Container
from ..core.exceptions import DomainError, ValidationError


def register(app: Flask, container: Container) -> None:
    codes = container.verification_service

    @app.route("/api/auth/send-code", methods=["POST"], endpoint="send_code")
    def send_code():
        try:
            data = json_body()
            issued = codes.send_login_code(str(data.get("email", "")))
        except DomainError as e:
            return fail_from(e)
        except Exception:
            app.logger.exception("send verification code failed")
            return fail("Failed to send code. Please try again.", status=500)

        payload = {"worker_id": issued.worker_id, "expires_at": issued.expires_at.isoformat()}
        # Without a mail transport the demo kiosk shows the code on screen.
        if container.demo_mode:
            payload["code"] = issued.code
        return ok(**payload)

    @app.route("/api/auth/verify", methods=["POST"], endpoint="verify_code")
    def verify_code():
        try:
            data = json_body()
            worker_id = str(data.get("worker_id") or "").strip()
            if not worker_id:
                raise ValidationError("worker_id is required.")
            worker = codes.verify_code(worker_id, str(data.get("code", "")))
        except DomainError as e:
            return fail_from(e)
        except Exception:
            app.logger.exception("verify code failed")
            return fail("Verification failed. Please try again.", status=500)

        session.clear()
        session["worker_id"] = worker.worker_id
        session["name"] = worker.full_name
        session["role"] = worker.role.value
        return ok(worker=worker.to_public())

    @app.route("/api/auth/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return ok()
