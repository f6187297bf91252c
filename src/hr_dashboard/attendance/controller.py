from __future__ import annotations

from dataclasses import asdict

from flask import Flask, g, jsonify

from ..common.datetime_utils import format_date, now_local
from ..common.web import date_arg, login_required
from ..container import Container
from .views import to_row


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service
    signed_in = login_required(container.directory)

    @app.route("/attendance", methods=["GET"], endpoint="attendance")
    @signed_in
    def attendance():
        work_date = date_arg()
        records = service.list_for_date(g.viewer, work_date)
        body = {
            "date": format_date(work_date),
            "records": [to_row(r) for r in records],
        }
        if not g.viewer.is_admin and work_date == now_local().date():
            today = service.today_record(g.viewer, today=work_date)
            body["today"] = to_row(today) if today else None
        return jsonify(body)

    @app.route("/attendance/clock-in", methods=["POST"], endpoint="clock_in")
    @signed_in
    def clock_in():
        record = service.clock_in(g.viewer)
        return jsonify({"record": to_row(record)}), 201

    @app.route("/attendance/clock-out", methods=["POST"], endpoint="clock_out")
    @signed_in
    def clock_out():
        record = service.clock_out(g.viewer)
        return jsonify({"record": to_row(record)})

    @app.route("/attendance/summary", methods=["GET"], endpoint="attendance_summary")
    @signed_in
    def attendance_summary():
        work_date = date_arg()
        counts = service.daily_summary(g.viewer, work_date)
        return jsonify({"date": format_date(work_date), **asdict(counts)})
