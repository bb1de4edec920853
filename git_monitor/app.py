"""Flask application factory for Git Monitor.

Wires the configuration loaded at startup into the dashboard service and
registers the catch-all dashboard route.

Usage:
    from git_monitor.app import create_app
    app = create_app("config.yaml")
    app.run(port=3000)
"""

import logging
import sys
from pathlib import Path

from flask import Flask

from git_monitor.models import AppConfig
from git_monitor.routes import register_blueprints
from git_monitor.services import ConfigError, ConfigService, DashboardService

logger = logging.getLogger(__name__)

USAGE = "Usage: git-monitor PATH_TO_CONFIG"


def create_app(config_path: str | Path) -> Flask:
    """Create and configure the Flask application.

    Args:
        config_path: Path to the configuration file.

    Returns:
        Configured Flask application.

    Raises:
        ConfigError: If the configuration is missing or invalid.
    """
    config_service = ConfigService(config_path)
    config = config_service.load()

    app = Flask(__name__)
    app.config["TESTING"] = False

    # Store services on app for access in routes
    app.extensions["config"] = config
    app.extensions["config_service"] = config_service

    _init_services(app, config)

    register_blueprints(app)

    return app


def _init_services(app: Flask, config: AppConfig) -> None:
    """Initialize services and wire them together.

    Args:
        app: Flask application.
        config: Application configuration.
    """
    app.extensions["dashboard_service"] = DashboardService(config)
    logger.info("Services initialized")


def main(argv: list[str] | None = None) -> int:
    """Run the Git Monitor server.

    Args:
        argv: Command line arguments, excluding the program name.

    Returns:
        Process exit code.
    """
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        print(USAGE)
        return 2

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        app = create_app(args[0])
    except ConfigError as e:
        logger.error(f"Refusing to start: {e}")
        print(e, file=sys.stderr)
        return 1

    config = app.extensions["config"]
    logger.info(f"Starting Git Monitor on {config.host}:{config.port}")
    app.run(host=config.host, port=config.port, debug=config.debug, threaded=True)
    return 0


if __name__ == "__main__":
    sys.exit(main())
