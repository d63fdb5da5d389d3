SECRET_KEY = "test-secret"

# No remote backend in tests: the selector falls back to the local service.
DB_CONFIG = None

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

STORAGE_BACKEND = "memory"
STORAGE_DIR = ""
STORAGE_KEY_PREFIX = "teal-"

LOCAL_SERVICE_LATENCY = 0.0
FORCE_LOCAL_SERVICES = False

AUTO_INIT_DB = False
AUTO_SEED_DB = False
