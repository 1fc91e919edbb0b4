from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import current_user_id, json_body, json_endpoint
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/users", methods=["GET"], endpoint="users")
    @json_endpoint
    def users():
        return jsonify(container.user_service.list_users(requested_by=current_user_id()))

    @app.route("/api/users", methods=["POST"], endpoint="add_user")
    @json_endpoint
    def add_user():
        user_id = container.user_service.add_user(requested_by=current_user_id(), payload=json_body())
        return jsonify({"success": True, "message": "User added successfully", "id": user_id})
