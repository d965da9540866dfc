from __future__ import annotations

from flask import Flask, jsonify, request

from ..access.guards import action_required, child_access_required
from ..common.datetime_utils import parse_iso_date
from ..core.exceptions import NurseryError, ValidationError
from ..container import Container


def _period_from_args(args):
    try:
        return parse_iso_date(args.get("start", "")), parse_iso_date(args.get("end", ""))
    except ValueError:
        raise ValidationError("start and end must be YYYY-MM-DD dates")


def register(app: Flask, container: Container) -> None:
    @app.route("/api/billing/children/<int:child_id>/invoice", methods=["GET"], endpoint="invoice_preview")
    @action_required("payment", "create")
    @child_access_required(container.billing_service.child_ownership)
    def invoice_preview(child_id: int):
        try:
            start, end = _period_from_args(request.args)
            invoice = container.billing_service.build_invoice(child_id=child_id, start=start, end=end)
        except NurseryError as e:
            return jsonify({"error": str(e)}), e.status_code
        return jsonify({"invoice": invoice.to_dict() if invoice else None})

    @app.route("/api/billing/children/<int:child_id>/presence", methods=["GET"], endpoint="presence_summary")
    @action_required("attendance", "view")
    @child_access_required(container.billing_service.child_ownership)
    def presence_summary(child_id: int):
        try:
            start, end = _period_from_args(request.args)
            summary = container.billing_service.presence_summary(child_id=child_id, start=start, end=end)
        except NurseryError as e:
            return jsonify({"error": str(e)}), e.status_code
        return jsonify(
            {
                "total_minutes": summary.total_minutes,
                "total_hours": str(summary.total_hours),
                "total_days": summary.total_days,
                "average_daily_minutes": summary.average_daily_minutes,
            }
        )

    @app.route("/api/billing/children/<int:child_id>/invoice/notify", methods=["POST"], endpoint="invoice_notify")
    @action_required("payment", "edit")
    @child_access_required(container.billing_service.child_ownership)
    def invoice_notify(child_id: int):
        try:
            start, end = _period_from_args(request.args)
            invoice = container.billing_service.build_invoice(child_id=child_id, start=start, end=end)
            if invoice is None:
                return jsonify({"error": "No billable attendance in this period"}), 404
            notification_id = container.billing_service.notify_parent(invoice)
        except NurseryError as e:
            return jsonify({"error": str(e)}), e.status_code
        return jsonify({"invoice": invoice.to_dict(), "notification_id": notification_id})
