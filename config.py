"""
config.py
---------
Central configuration module. Loads all environment variables
from the .env file and exposes them as typed constants.
"""

import os
from dotenv import load_dotenv

load_dotenv()


# ── PostgreSQL ────────────────────────────────────────────
DB_HOST: str = os.getenv("DB_HOST", "127.0.0.1")
DB_PORT: int = int(os.getenv("DB_PORT", "5432"))
DB_NAME: str = os.getenv("DB_NAME", "book_store")
DB_USER: str = os.getenv("DB_USER", "")
DB_PASS: str = os.getenv("DB_PASS", "")

# libpq keyword/value DSN; user and password are left to libpq defaults when unset
DATABASE_URL: str = " ".join(
    f"{key}={value}"
    for key, value in (
        ("host", DB_HOST),
        ("port", DB_PORT),
        ("dbname", DB_NAME),
        ("user", DB_USER),
        ("password", DB_PASS),
    )
    if value != ""
)

# ── Logging ───────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
