from __future__ import annotations

from datetime import timedelta

from flask import Flask, jsonify, session

from ..access.guards import current_access, current_session_user, login_required, permission_required
from ..access.resolver import AccessControlResolver
from ..common.request_utils import json_object_body
from ..core.constants import DEFAULT_SESSION_DAYS
from ..core.enums import Permission, parse_role
from ..core.exceptions import AuthenticationError, AuthorizationError, ValidationError
from ..core.logger import get_logger
from ..container import Container

log = get_logger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/auth/login", methods=["POST"], endpoint="login")
    def login():
        try:
            payload = json_object_body()
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        try:
            s_user = container.auth_service.authenticate(payload.get("email", ""), payload.get("password", ""))
        except AuthenticationError as e:
            return jsonify({"error": str(e)}), 401

        session.clear()
        session.permanent = bool(payload.get("remember_me"))
        app.permanent_session_lifetime = timedelta(days=DEFAULT_SESSION_DAYS)
        session["user_id"] = s_user.user_id
        session["name"] = s_user.full_name
        session["role"] = s_user.role.value if s_user.role else None

        access = AccessControlResolver.for_user(s_user)
        return jsonify({"user": {"id": s_user.user_id, "name": s_user.full_name}, "access": access.to_dict()})

    @app.route("/api/auth/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return jsonify({"access": AccessControlResolver.anonymous().to_dict()})

    @app.route("/api/auth/me", methods=["GET"], endpoint="me")
    @login_required
    def me():
        s_user = current_session_user()
        return jsonify(
            {
                "user": {"id": s_user.user_id, "name": s_user.full_name, "is_authenticated": True},
                "access": current_access().to_dict(),
            }
        )

    @app.route("/api/admin/users", methods=["POST"], endpoint="create_user")
    @permission_required(Permission.MANAGE_USERS)
    def create_user():
        try:
            payload = json_object_body()
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        role = parse_role(payload.get("role"))
        if role is None:
            return jsonify({"error": "Invalid account role"}), 400
        try:
            user_id = container.user_service.create_account(
                access=current_access(),
                first_name=payload.get("first_name", ""),
                last_name=payload.get("last_name", ""),
                email=payload.get("email", ""),
                password=payload.get("password", ""),
                role=role,
                phone=payload.get("phone"),
            )
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except AuthorizationError as e:
            return jsonify({"error": str(e)}), 403
        return jsonify({"user_id": user_id}), 201
