import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "mysql")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "punchpro_db"),
}

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
SEED_DEMO_DATA = bool(int(os.getenv("SEED_DEMO_DATA", "0")))

ENFORCE_GEOFENCE = bool(int(os.getenv("ENFORCE_GEOFENCE", "1")))
REJECT_MOCKED_LOCATIONS = bool(int(os.getenv("REJECT_MOCKED_LOCATIONS", "1")))

WORK_START = os.getenv("WORK_START", "09:00")
LATE_GRACE_MINUTES = int(os.getenv("LATE_GRACE_MINUTES", "5"))
HALF_DAY_HOURS = float(os.getenv("HALF_DAY_HOURS", "4"))
