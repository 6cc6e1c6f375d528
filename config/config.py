"""Settings shared by every environment module."""
import os

LOGIN_URL = os.getenv("LOGIN_URL", "/login")

# Roles (set by the host app in session["role"]) that see the admin views.
ADMIN_ROLES = tuple(
    role.strip() for role in os.getenv("ADMIN_ROLES", "admin,finanzas_senior").split(",") if role.strip()
)

# Transition gate thresholds ("HH:mm" strings are accepted).
JORNADA_RULES = {
    "clock_in_earliest": os.getenv("JORNADA_CLOCK_IN_EARLIEST", "09:30"),
    "lunch_window_start": os.getenv("JORNADA_LUNCH_START", "13:00"),
    "lunch_window_end": os.getenv("JORNADA_LUNCH_END", "15:00"),
    "min_lunch_minutes": int(os.getenv("JORNADA_MIN_LUNCH_MINUTES", "30")),
}

GATE_REFRESH_SECONDS = int(os.getenv("GATE_REFRESH_SECONDS", "30"))
HISTORY_PAGE_SIZE = int(os.getenv("HISTORY_PAGE_SIZE", "10"))


def db_config_from_env(*, default_password: str = "") -> dict:
    return {
        "host": os.getenv("DB_HOST", "localhost"),
        "port": int(os.getenv("DB_PORT", "3306")),
        "user": os.getenv("DB_USER", "root"),
        "password": os.getenv("DB_PASSWORD", default_password),
        "database": os.getenv("DB_NAME", "jornada_db"),
    }
