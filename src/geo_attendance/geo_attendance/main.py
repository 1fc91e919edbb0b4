from __future__ import annotations

import importlib
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .common.geo import GeoPoint, OfficeLocation
from .container import Container, build_container
from .database.bootstrap import apply_schema, apply_seed_sql, list_tables
from .database.connection import DBConfig, DatabaseConnection
from .notifications.controller import register as register_notifications
from .reports.controller import register as register_reports
from .users.controller import register as register_users

logger = logging.getLogger(__name__)

DATABASE_DIR = Path(__file__).resolve().parents[3] / "database"


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def office_from_settings(settings) -> OfficeLocation:
    return OfficeLocation(
        point=GeoPoint(latitude=float(settings.OFFICE_LATITUDE), longitude=float(settings.OFFICE_LONGITUDE)),
        allowed_radius=int(settings.ALLOWED_RADIUS_METERS),
    )


def _prepare_database(settings, db_config: dict) -> None:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    if bool(getattr(settings, "AUTO_INIT_DB", False)):
        apply_schema(conn, schema_path=DATABASE_DIR / "schema.sql")
        logger.info("schema ready (tables=%s)", len(list_tables(conn)))
    if bool(getattr(settings, "AUTO_SEED_DB", False)):
        apply_seed_sql(conn, seed_path=DATABASE_DIR / "seed.sql")
        logger.info("demo seed ready")


def create_app(container: Optional[Container] = None) -> Flask:
    """App factory. Pass a prebuilt container to run without MySQL (tests)."""
    load_dotenv(override=False)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app = Flask(__name__)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info(
            "settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )
        _prepare_database(settings, db_config)
        container = build_container(db_config=db_config, office=office_from_settings(settings))

    app.extensions["geo_attendance"] = container

    @app.route("/", endpoint="health")
    def health():
        return jsonify(
            {
                "message": "Attendance System API is running!",
                "status": "healthy",
                "timestamp": datetime.now().isoformat(),
            }
        )

    register_attendance(app, container)
    register_notifications(app, container)
    register_users(app, container)
    register_reports(app, container)

    return app
