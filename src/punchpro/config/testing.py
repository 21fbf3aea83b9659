SECRET_KEY = "test-secret"

STORAGE_BACKEND = "memory"

DB_CONFIG = {
    "host": "localhost",
    "port": 3306,
    "user": "root",
    "password": "",
    "database": "punchpro_test",
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = False
SEED_DEMO_DATA = True

ENFORCE_GEOFENCE = True
REJECT_MOCKED_LOCATIONS = True

WORK_START = "09:00"
LATE_GRACE_MINUTES = 5
HALF_DAY_HOURS = 4.0
