from __future__ import annotations

from flask import Flask, g, jsonify, request

from ..common.datetime_utils import parse_date_arg
from ..common.web import admin_required, login_required, payload
from ..container import Container
from .views import ALL


def register(app: Flask, container: Container) -> None:
    service = container.leave_service
    signed_in = login_required(container.directory)
    admin_only = admin_required(container.directory)

    @app.route("/leaves", methods=["GET"], endpoint="leaves")
    @signed_in
    def leaves():
        records = service.list_visible(
            g.viewer,
            search=request.args.get("search", ""),
            status=request.args.get("status", ALL) or ALL,
        )
        return jsonify(
            {
                "leaves": [r.to_dict() for r in records],
                "counts": service.status_counts(g.viewer),
            }
        )

    @app.route("/leaves", methods=["POST"], endpoint="apply_leave")
    @signed_in
    def apply_leave():
        data = payload()
        record = service.apply(
            g.viewer,
            leave_type=str(data.get("leaveType", "")),
            department=str(data.get("department", "")),
            start_date=parse_date_arg(str(data.get("startDate", "")), "startDate"),
            end_date=parse_date_arg(str(data.get("endDate", "")), "endDate"),
            reason=str(data.get("reason", "")),
        )
        return jsonify({"leave": record.to_dict()}), 201

    @app.route("/leaves/<leave_id>/approve", methods=["POST"], endpoint="approve_leave")
    @admin_only
    def approve_leave(leave_id: str):
        record = service.approve(g.viewer, leave_id)
        return jsonify({"leave": record.to_dict()})

    @app.route("/leaves/<leave_id>/reject", methods=["POST"], endpoint="reject_leave")
    @admin_only
    def reject_leave(leave_id: str):
        record = service.reject(g.viewer, leave_id)
        return jsonify({"leave": record.to_dict()})
