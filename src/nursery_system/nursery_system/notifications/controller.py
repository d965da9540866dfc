from __future__ import annotations

from datetime import datetime

from flask import Flask, jsonify, request

from ..access.guards import current_session_user, login_required, roles_required
from ..common.datetime_utils import end_of_day, parse_optional_datetime
from ..common.request_utils import int_list, json_object_body
from ..core.enums import NotificationPriority, NotificationType, Role, parse_role
from ..core.exceptions import ValidationError
from ..container import Container
from .model import DateRange, NotificationDraft, NotificationFilter

_TRUTHY = {"1", "true", "yes", "on"}


def _filter_from_args(args) -> NotificationFilter:
    try:
        start = parse_optional_datetime(args.get("start"))
        end = parse_optional_datetime(args.get("end"))
    except ValueError:
        raise ValidationError("start/end must be ISO dates")

    date_range = None
    if start or end:
        if end and len(args.get("end", "").strip()) == 10:
            end = end_of_day(end.date())
        date_range = DateRange(start=start or datetime.min, end=end or datetime.max)

    return NotificationFilter(
        type=args.get("type") or None,
        priority=args.get("priority") or None,
        unread_only=args.get("unread_only", "").lower() in _TRUTHY,
        search=args.get("search") or None,
        date_range=date_range,
    )


def register(app: Flask, container: Container) -> None:
    @app.route("/api/notifications", methods=["GET"], endpoint="notifications")
    @login_required
    def notifications():
        try:
            criteria = _filter_from_args(request.args)
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        items = container.notification_service.list_for_user(current_session_user().user_id, criteria)
        return jsonify({"notifications": [n.to_dict() for n in items]})

    @app.route("/api/notifications/stats", methods=["GET"], endpoint="notification_stats")
    @login_required
    def notification_stats():
        stats = container.notification_service.stats_for_user(current_session_user().user_id)
        return jsonify(stats.to_dict())

    @app.route("/api/notifications/unread-count", methods=["GET"], endpoint="notification_unread_count")
    @login_required
    def notification_unread_count():
        return jsonify({"unread": container.notification_service.unread_count(current_session_user().user_id)})

    @app.route("/api/notifications/read", methods=["POST"], endpoint="notification_mark_read")
    @login_required
    def notification_mark_read():
        try:
            ids = int_list(json_object_body().get("ids", []), "ids")
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        updated = container.notification_service.mark_as_read(ids, user_id=current_session_user().user_id)
        return jsonify({"updated": updated})

    @app.route("/api/notifications/preferences", methods=["GET"], endpoint="notification_preferences")
    @login_required
    def notification_preferences():
        prefs = container.notification_service.preferences_for(current_session_user().user_id)
        return jsonify(prefs.to_dict())

    @app.route("/api/notifications/preferences", methods=["PUT"], endpoint="notification_preferences_update")
    @login_required
    def notification_preferences_update():
        try:
            prefs = container.notification_service.update_preferences_for(
                current_session_user().user_id, json_object_body()
            )
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        return jsonify(prefs.to_dict())

    @app.route("/api/notifications/broadcast", methods=["POST"], endpoint="notification_broadcast")
    @roles_required(Role.ADMIN)
    def notification_broadcast():
        try:
            payload = json_object_body()
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        role = parse_role(payload.get("role"))
        if role is None:
            return jsonify({"error": "Invalid target role"}), 400

        draft = NotificationDraft(
            title=payload.get("title", ""),
            message=payload.get("message", ""),
            type=payload.get("type") or NotificationType.SYSTEM,
            priority=payload.get("priority") or NotificationPriority.MEDIUM,
        )
        try:
            sent = container.notification_service.notify_role(role, draft)
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        return jsonify({"sent": sent})
