import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "access_control_db"),
}

REPORT_TIMEZONE = os.getenv("REPORT_TIMEZONE", "America/Toronto")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
DEBUG = False

MAX_CONTENT_LENGTH = 5 * 1024 * 1024

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_BOOTSTRAP_USERS = bool(int(os.getenv("AUTO_BOOTSTRAP_USERS", "1")))

# Passwords must come from the environment in production
DEFAULT_USERS = [
    {"username": "Security", "password": os.getenv("SECURITY_PASSWORD", ""), "role": "security"},
    {"username": "Authorizer", "password": os.getenv("AUTHORIZER_PASSWORD", ""), "role": "authorizer"},
    {"username": "Access Controller", "password": os.getenv("CONTROLLER_PASSWORD", ""), "role": "controller"},
]
