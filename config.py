"""
config.py
---------
Central configuration module. Loads all environment variables
from the .env file and exposes them as typed constants.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


# ── PostgreSQL ────────────────────────────────────────────
DB_HOST: str = os.getenv("DB_HOST", "localhost")
DB_PORT: int = int(os.getenv("DB_PORT", "5432"))
DB_NAME: str = os.getenv("DB_NAME", "gradebook")
DB_USER: str = os.getenv("DB_USER", "postgres")
DB_PASS: str = os.getenv("DB_PASS", "")

DATABASE_URL: str = (
    f"postgresql://{DB_USER}:{DB_PASS}@{DB_HOST}:{DB_PORT}/{DB_NAME}"
)

# Database used to issue CREATE DATABASE during setup
MAINTENANCE_DB: str = os.getenv("MAINTENANCE_DB", "postgres")

# ── SQL scripts ───────────────────────────────────────────
SQL_DIR: Path = Path(os.getenv("SQL_DIR", str(Path(__file__).resolve().parent / "sql")))

SETUP_SQL_FILES: tuple[str, ...] = (
    "create-tables.sql",
    "functions.sql",
    "procedures.sql",
    "triggers.sql",
)
SEED_SQL_FILE: str = "seed.sql"

# ── Logging ───────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "WARNING").upper()
