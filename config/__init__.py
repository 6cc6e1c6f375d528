"""Settings module selection.

``APP_ENV`` names the environment (``development`` when unset). A dotted
module path in ``APP_SETTINGS_MODULE`` wins over it, so a host application
can ship its own settings module.
"""
import os

_ENVIRONMENTS = {
    "dev": "config.development",
    "development": "config.development",
    "prod": "config.production",
    "production": "config.production",
    "test": "config.testing",
    "testing": "config.testing",
}


def get_settings_module() -> str:
    explicit = os.getenv("APP_SETTINGS_MODULE", "").strip()
    if explicit:
        return explicit

    env = os.getenv("APP_ENV", "development").strip().lower()
    return _ENVIRONMENTS.get(env, "config.development")
