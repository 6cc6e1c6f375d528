import os

from .config import ADMIN_ROLES, GATE_REFRESH_SECONDS, HISTORY_PAGE_SIZE, JORNADA_RULES, LOGIN_URL, db_config_from_env

SECRET_KEY = "test-secret"

DB_CONFIG = db_config_from_env()

DEBUG = False
TESTING = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")

AUTO_INIT_DB = False
AUTO_SEED_DB = False
