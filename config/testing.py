import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "access_control_test"),
}

REPORT_TIMEZONE = "America/Toronto"

LOG_LEVEL = "WARNING"
DEBUG = False
TESTING = True

MAX_CONTENT_LENGTH = 5 * 1024 * 1024

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_BOOTSTRAP_USERS = bool(int(os.getenv("AUTO_BOOTSTRAP_USERS", "0")))

DEFAULT_USERS = [
    {"username": "Security", "password": "security-test", "role": "security"},
    {"username": "Authorizer", "password": "authorizer-test", "role": "authorizer"},
    {"username": "Access Controller", "password": "controller-test", "role": "controller"},
]
