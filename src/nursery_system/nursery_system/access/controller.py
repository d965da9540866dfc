from __future__ import annotations

from flask import Flask, jsonify, request

from .guards import current_access


def register(app: Flask) -> None:
    @app.route("/api/access", methods=["GET"], endpoint="access_snapshot")
    def access_snapshot():
        return jsonify(current_access().to_dict())

    @app.route("/api/access/route", methods=["GET"], endpoint="access_route")
    def access_route():
        path = request.args.get("path", "")
        if not path:
            return jsonify({"error": "path is required"}), 400
        return jsonify({"path": path, "allowed": current_access().can_access_route(path)})

    @app.route("/api/access/actions/<resource>/<action>", methods=["GET"], endpoint="access_action")
    def access_action(resource: str, action: str):
        return jsonify(
            {
                "resource": resource,
                "action": action,
                "allowed": current_access().can_perform_action(resource, action),
            }
        )
