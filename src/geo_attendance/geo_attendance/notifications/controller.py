from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import current_user_id, json_endpoint
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/notifications", methods=["GET"], endpoint="notifications")
    @json_endpoint
    def notifications():
        return jsonify(container.notification_service.list_for_user(current_user_id()))

    @app.route("/api/notifications/<int:notification_id>/read", methods=["PUT"], endpoint="notification_read")
    @json_endpoint
    def notification_read(notification_id: int):
        container.notification_service.mark_read(notification_id, user_id=current_user_id())
        return jsonify({"success": True})
