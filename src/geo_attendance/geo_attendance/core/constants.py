"""Constants and defaults.

Note: Keep rule thresholds here to avoid magic numbers spread across code.
Times are minutes since local midnight.
"""

PUNCH_IN_OPENS_AT = 9 * 60  # 09:00
LATE_AFTER = 10 * 60 + 10  # 10:10
WORKDAY_ENDS_AT = 18 * 60  # 18:00

ABSENT_BELOW_HOURS = 4
HALF_DAY_BELOW_HOURS = 6

DEFAULT_ALLOWED_RADIUS_METERS = 200
DEFAULT_OFFICE_LATITUDE = 28.460315
DEFAULT_OFFICE_LONGITUDE = 77.0336622

# Mean earth radius used for geofence distances (meters).
EARTH_RADIUS_METERS = 6378137

DEFAULT_REPORT_DAYS = 7
