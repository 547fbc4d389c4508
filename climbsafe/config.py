"""
File: config.py
Purpose: Default application settings.

Every value can be overridden with a CLIMBSAFE_-prefixed environment variable
(e.g. ``CLIMBSAFE_DB_PORT=3307``); create_app applies them through
Flask's ``Config.from_prefixed_env``, which parses values as JSON where possible.
"""

ENV_PREFIX = "CLIMBSAFE"


class Config:
    SECRET_KEY = "dev"

    # 'memory' keeps guides in process only, 'mysql' writes through to the guides table
    GUIDE_STORE = "memory"

    DB_HOST = "localhost"
    DB_PORT = 3306
    DB_USER = "root"
    DB_PASSWORD = "root"
    DB_NAME = "climbsafe"
    DB_POOL_SIZE = 5

    LOG_LEVEL = "INFO"


class TestingConfig(Config):
    TESTING = True
    LOG_LEVEL = "DEBUG"


def db_config_from(config):
    """Builds the mysql.connector keyword arguments from a Flask config mapping."""
    return {
        "host": config["DB_HOST"],
        "port": int(config["DB_PORT"]),
        "user": config["DB_USER"],
        "password": config["DB_PASSWORD"],
        "database": config["DB_NAME"],
        "charset": "utf8mb4",
        "collation": "utf8mb4_unicode_ci"
    }
