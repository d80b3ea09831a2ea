# Copyright (c) 2025 Damien Boisvert (AlphaGameDeveloper)
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

from flask import Blueprint, current_app, jsonify
from datetime import datetime, timezone
from ..version import __version__
import os

bp_healthcheck = Blueprint('healthcheck', __name__)

class Healthcheck:
    def __init__(self, app):
        self.app = app
        self.overall_healthy = True
        self.result = {
            "status": "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "version": __version__,
            "checks": {},
            "environment": "development" if app.debug else "production"
        }

    def run(self):
        self.check_storage()
        self.check_public()
        self.check_discord()
        self.result["status"] = "healthy" if self.overall_healthy else "unhealthy"
        return self.result, self.overall_healthy

    def check_storage(self):
        store = self.app.extensions["archive.repository"].store
        try:
            names = store.list_names()
            self.result["checks"]["storage"] = {
                "status": "healthy",
                "message": "Posts store is readable",
                "details": {
                    "location": store.describe(),
                    "extension": store.extension,
                    "post_files": len(names)
                }
            }
        except OSError as e:
            self.overall_healthy = False
            self.result["checks"]["storage"] = {
                "status": "unhealthy",
                "message": f"Posts store check failed: {str(e)}",
                "details": {"location": store.describe()}
            }

    def check_public(self):
        public_dir = self.app.static_folder
        present = bool(public_dir) and os.path.isfile(os.path.join(public_dir, "index.html"))
        self.result["checks"]["public"] = {
            "status": "healthy" if present else "degraded",
            "message": "Landing page available" if present else "Landing page missing",
            "details": {"public_dir": public_dir}
        }

    def check_discord(self):
        notifier = self.app.extensions["archive.discord"]
        self.result["checks"]["discord"] = {
            "status": "healthy" if notifier.is_healthy() else "degraded",
            "message": "Discord notifications configured" if notifier.enabled else "Discord notifications not configured",
            "details": {
                "webhook_configured": notifier.enabled,
                "queue_size": notifier.get_queue_size()
            }
        }

@bp_healthcheck.route("/api/health")
@bp_healthcheck.route("/api/healthcheck")
@bp_healthcheck.route("/health")
@bp_healthcheck.route("/healthcheck")
def health():
    """Health of the posts store, landing page and notifier."""
    health_status, overall_healthy = Healthcheck(current_app).run()
    return jsonify(health_status), 200 if overall_healthy else 503
