import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "nursery_db"),
}

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))

NOTIFICATION_RETENTION_DAYS = int(os.getenv("NOTIFICATION_RETENTION_DAYS", "30"))

BILLING = {
    "hourly_rate": os.getenv("BILLING_HOURLY_RATE", "15"),
    "full_day_hours": int(os.getenv("BILLING_FULL_DAY_HOURS", "8")),
    "full_day_rate": os.getenv("BILLING_FULL_DAY_RATE", "100"),
    "tax_rate": os.getenv("BILLING_TAX_RATE", "0.10"),
}
