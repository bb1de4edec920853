"""Dashboard route for Git Monitor.

Every path and method renders the full dashboard from a fresh
classification pass.
"""

from flask import Blueprint, current_app, render_template
from werkzeug.exceptions import MethodNotAllowed

from git_monitor.services.dashboard_service import DashboardService

dashboard_bp = Blueprint("dashboard", __name__)

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE", "CONNECT"]

HTML_HEADERS = {"Content-Type": "text/html; charset=utf-8"}


def _get_dashboard_service() -> DashboardService:
    """Get the dashboard service from the app."""
    return current_app.extensions["dashboard_service"]


def _render_dashboard():
    """Classify every project and render the page."""
    service = _get_dashboard_service()
    snapshot = service.collect()
    html = render_template(
        "index.html",
        title=service.config.title,
        snapshot=snapshot,
    )
    return html, 200, HTML_HEADERS


@dashboard_bp.route(
    "/",
    defaults={"path": ""},
    methods=ALL_METHODS,
    provide_automatic_options=False,
)
@dashboard_bp.route("/<path:path>", methods=ALL_METHODS, provide_automatic_options=False)
def dashboard(path):
    """Render the status of every configured project."""
    return _render_dashboard()


@dashboard_bp.app_errorhandler(MethodNotAllowed)
def method_not_allowed(error):
    """Extension methods get the dashboard too."""
    return _render_dashboard()
