import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "access_control_db"),
}

# Date/time columns of the scan log export are rendered in this zone
REPORT_TIMEZONE = os.getenv("REPORT_TIMEZONE", "America/Toronto")

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
DEBUG = True

# Roster uploads are small spreadsheets
MAX_CONTENT_LENGTH = 5 * 1024 * 1024

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Create the three role accounts below when they are missing
AUTO_BOOTSTRAP_USERS = bool(int(os.getenv("AUTO_BOOTSTRAP_USERS", "1")))

DEFAULT_USERS = [
    {"username": "Security", "password": os.getenv("SECURITY_PASSWORD", "Sicurezza123"), "role": "security"},
    {"username": "Authorizer", "password": os.getenv("AUTHORIZER_PASSWORD", "Autorizzatore123"), "role": "authorizer"},
    {"username": "Access Controller", "password": os.getenv("CONTROLLER_PASSWORD", "Controllore123"), "role": "controller"},
]
