from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..common.web import current_viewer, payload, sign_in_client, sign_out_client
from ..core.enums import Role
from ..core.exceptions import ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def _me(container: Container) -> dict:
    viewer = current_viewer(container.directory)
    return {
        "user": viewer.identity.to_dict() if viewer else None,
        "isAdmin": bool(viewer and viewer.is_admin),
        "ready": container.session_store.ready,
    }


def register(app: Flask, container: Container) -> None:
    store = container.session_store

    @app.route("/auth/sign-in", methods=["POST"], endpoint="sign_in")
    def sign_in():
        data = payload()
        identity = store.authenticate(str(data.get("email", "")), str(data.get("password", "")))
        sign_in_client(identity)
        logger.info("signed in %s", identity.email)
        return jsonify(_me(container))

    @app.route("/auth/sign-up", methods=["POST"], endpoint="sign_up")
    def sign_up():
        data = payload()
        role_s = data.get("role") or Role.EMPLOYEE.value
        try:
            role = Role(role_s)
        except ValueError:
            raise ValidationError("Invalid role")

        identity = store.register(
            str(data.get("email", "")),
            str(data.get("password", "")),
            first_name=str(data.get("firstName", "")),
            last_name=str(data.get("lastName", "")),
            role=role,
        )
        sign_in_client(identity)
        return jsonify(_me(container)), 201

    @app.route("/auth/sign-out", methods=["POST"], endpoint="sign_out")
    def sign_out():
        sign_out_client()
        return jsonify({})

    @app.route("/auth/me", methods=["GET"], endpoint="me")
    def me():
        return jsonify(_me(container))
