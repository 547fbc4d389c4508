"""
File: application.py
Purpose: Application factory wiring config, logging, registry, persistence and routes.
"""
import logging

from flask import Flask

from climbsafe.cli import guides_cli
from climbsafe.config import ENV_PREFIX, Config, db_config_from
from climbsafe.database.db_manager import DBManager
from climbsafe.models.daos.guide_dao import GuideDAO
from climbsafe.models.guide_registry import GuideRegistry
from climbsafe.routes.guide_routes import guide_bp
from climbsafe.services.guide_service import GuideRegistrationService

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level):
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("climbsafe").setLevel(level)


def build_registry(config):
    """Creates the registry, attaching and loading the MySQL store when configured."""
    store_kind = config["GUIDE_STORE"]
    if store_kind == "memory":
        return GuideRegistry()
    if store_kind != "mysql":
        raise ValueError(f"Unknown GUIDE_STORE: {store_kind!r}")

    db = DBManager(db_config_from(config), pool_size=int(config["DB_POOL_SIZE"]))
    registry = GuideRegistry(store=GuideDAO(db))
    registry.load()
    return registry


def create_app(config_object=None, registry=None):
    app = Flask(__name__)
    app.config.from_object(config_object or Config)
    app.config.from_prefixed_env(ENV_PREFIX)
    configure_logging(app.config["LOG_LEVEL"])

    if registry is None:
        registry = build_registry(app.config)

    # Attach the service to the app so it is reachable from blueprints and commands
    app.guide_service = GuideRegistrationService(registry)

    app.register_blueprint(guide_bp, url_prefix='/guides')
    app.cli.add_command(guides_cli)

    logger.info("ClimbSafe started with %s guide store", app.config["GUIDE_STORE"])
    return app
