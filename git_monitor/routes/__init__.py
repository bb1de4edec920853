"""Flask routes for Git Monitor."""

from git_monitor.routes.dashboard import dashboard_bp

__all__ = [
    "dashboard_bp",
]


def register_blueprints(app):
    """Register all blueprints with the Flask app.

    Args:
        app: The Flask application instance.
    """
    app.register_blueprint(dashboard_bp)
