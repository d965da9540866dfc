import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "nursery_db"),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also create one demo account per role
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))

NOTIFICATION_RETENTION_DAYS = int(os.getenv("NOTIFICATION_RETENTION_DAYS", "30"))

BILLING = {
    "hourly_rate": os.getenv("BILLING_HOURLY_RATE", "15"),
    "full_day_hours": int(os.getenv("BILLING_FULL_DAY_HOURS", "8")),
    "full_day_rate": os.getenv("BILLING_FULL_DAY_RATE", "100"),
    "tax_rate": os.getenv("BILLING_TAX_RATE", "0.10"),
}
