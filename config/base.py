"""Settings shared by every environment. Values come from the environment (.env is loaded by the app factory)."""

import os

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "geo_attendance"),
}

# Geofence reference point
OFFICE_LATITUDE = float(os.getenv("OFFICE_LATITUDE", "28.460315"))
OFFICE_LONGITUDE = float(os.getenv("OFFICE_LONGITUDE", "77.0336622"))
ALLOWED_RADIUS_METERS = int(os.getenv("ALLOWED_RADIUS_METERS", "200"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
