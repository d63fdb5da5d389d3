from __future__ import annotations

import logging
from functools import wraps

from flask import Flask, jsonify, request

from ..common.async_utils import run_sync
from ..core.enums import Capability
from ..core.exceptions import (
    AuthenticationError,
    DuplicateEmailError,
    NotFoundError,
    RemoteServiceError,
    ValidationError,
)
from ..container import Container
from ..records.codec import encode_list, to_json_dict

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    """User-management endpoints, served by whichever backend the selector picked."""

    selector = container.selector

    def _service():
        return selector.get_service(Capability.USER)

    def json_errors(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                return view(*args, **kwargs)
            except ValidationError as e:
                return jsonify({"success": False, "message": str(e)}), 400
            except AuthenticationError as e:
                return jsonify({"success": False, "message": str(e)}), 401
            except NotFoundError as e:
                return jsonify({"success": False, "message": str(e)}), 404
            except DuplicateEmailError as e:
                return jsonify({"success": False, "message": str(e)}), 409
            except RemoteServiceError as e:
                logger.warning("User service failure: %s", e)
                return jsonify({"success": False, "message": "User service unavailable"}), 503

        return wrapper

    def _body() -> dict:
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            raise ValidationError("Expected a JSON object")
        return data

    @app.route("/api/users/service", methods=["GET"], endpoint="api_service_users")
    @json_errors
    def list_users():
        role = request.args.get("role")
        department = request.args.get("department")

        async def _run():
            service = await _service()
            if role:
                return await service.by_role(role)
            if department:
                return await service.by_department(department)
            return await service.list()

        return jsonify(encode_list(run_sync(_run()))), 200

    @app.route("/api/users/service", methods=["POST"], endpoint="api_service_create_user")
    @json_errors
    def create_user():
        data = _body()

        async def _run():
            service = await _service()
            return await service.create(data)

        return jsonify(to_json_dict(run_sync(_run()))), 201

    @app.route("/api/users/service/status", methods=["GET"], endpoint="api_service_status")
    def service_status():
        return jsonify(selector.get_status().as_dict()), 200

    @app.route("/api/users/service/login", methods=["POST"], endpoint="api_service_login")
    @json_errors
    def login():
        data = _body()
        email = str(data.get("email") or "").strip()
        password = str(data.get("password") or "")

        async def _run():
            service = await _service()
            return await service.authenticate(email, password)

        user = run_sync(_run())
        return jsonify({"success": True, "user": to_json_dict(user)}), 200

    @app.route("/api/users/service/<user_id>", methods=["GET"], endpoint="api_service_get_user")
    @json_errors
    def get_user(user_id: str):
        async def _run():
            service = await _service()
            return await service.get_by_id(user_id)

        user = run_sync(_run())
        if user is None:
            raise NotFoundError(f"User {user_id!r} not found")
        return jsonify(to_json_dict(user)), 200

    @app.route("/api/users/service/<user_id>", methods=["PATCH"], endpoint="api_service_update_user")
    @json_errors
    def update_user(user_id: str):
        changes = dict(_body(), id=user_id)

        async def _run():
            service = await _service()
            return await service.update(changes)

        return jsonify(to_json_dict(run_sync(_run()))), 200

    @app.route("/api/users/service/<user_id>/active", methods=["POST"], endpoint="api_service_toggle_user")
    @json_errors
    def toggle_user(user_id: str):
        is_active = _body().get("isActive")
        if not isinstance(is_active, bool):
            raise ValidationError("isActive must be true or false")

        async def _run():
            service = await _service()
            await service.toggle_status(user_id, is_active)

        run_sync(_run())
        return jsonify({"success": True, "isActive": is_active}), 200

    @app.route("/api/users/service/<user_id>", methods=["DELETE"], endpoint="api_service_delete_user")
    @json_errors
    def delete_user(user_id: str):
        async def _run():
            service = await _service()
            await service.delete(user_id)

        run_sync(_run())
        return jsonify({"success": True}), 200
