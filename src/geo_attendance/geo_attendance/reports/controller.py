from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import current_user_id, json_endpoint
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/analytics", methods=["GET"], endpoint="analytics")
    @json_endpoint
    def analytics():
        return jsonify(container.report_service.analytics(requested_by=current_user_id()).as_dict())
