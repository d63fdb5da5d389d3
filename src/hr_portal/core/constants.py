"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_STORAGE_KEY_PREFIX = "teal-"
DEFAULT_LOCAL_SERVICE_LATENCY = 0.5
DEFAULT_DEMO_PASSWORD = "Admin123"
BACKUP_FILE_PREFIX = "teal-backup-"
EXPORT_DATE_FIELD = "exportDate"
