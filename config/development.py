import os

from .config import ADMIN_ROLES, GATE_REFRESH_SECONDS, HISTORY_PAGE_SIZE, JORNADA_RULES, LOGIN_URL, db_config_from_env

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = db_config_from_env()

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed demo colaboradores on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
