from __future__ import annotations

from dataclasses import asdict

from flask import Flask, g, jsonify

from ..common.datetime_utils import now_local
from ..common.web import admin_required, login_required, payload
from ..container import Container
from .views import to_row


def register(app: Flask, container: Container) -> None:
    service = container.salary_service
    signed_in = login_required(container.directory)
    admin_only = admin_required(container.directory)

    def _save(record_id=None):
        data = payload()
        today = now_local().date()
        return service.save(
            g.viewer,
            user_id=data.get("userId", ""),
            base_salary=data.get("baseSalary"),
            incentives=data.get("incentives", 0),
            deductions=data.get("deductions", 0),
            month=data.get("month", today.month),
            year=data.get("year", today.year),
            status=data.get("status", "pending"),
            record_id=record_id,
        )

    @app.route("/salaries", methods=["GET"], endpoint="salaries")
    @signed_in
    def salaries():
        records = service.list_visible(g.viewer)
        return jsonify(
            {
                "records": [to_row(r, service.calculator) for r in records],
                "summary": asdict(service.summary(g.viewer)),
            }
        )

    @app.route("/salaries/summary", methods=["GET"], endpoint="salary_summary")
    @signed_in
    def salary_summary():
        return jsonify(asdict(service.summary(g.viewer)))

    @app.route("/salaries", methods=["POST"], endpoint="create_salary")
    @admin_only
    def create_salary():
        record = _save()
        return jsonify({"record": to_row(record, service.calculator)}), 201

    @app.route("/salaries/<record_id>", methods=["PUT"], endpoint="update_salary")
    @admin_only
    def update_salary(record_id: str):
        record = _save(record_id)
        return jsonify({"record": to_row(record, service.calculator)})

    @app.route("/salaries/<record_id>", methods=["DELETE"], endpoint="delete_salary")
    @admin_only
    def delete_salary(record_id: str):
        service.delete(g.viewer, record_id)
        return jsonify({})

    @app.route("/salaries/<record_id>/status", methods=["POST"], endpoint="salary_status")
    @admin_only
    def salary_status(record_id: str):
        data = payload()
        record = service.set_status(g.viewer, record_id, str(data.get("status", "")))
        return jsonify({"record": to_row(record, service.calculator)})
