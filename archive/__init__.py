# Copyright (c) 2025 Damien Boisvert (AlphaGameDeveloper)
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

from flask import Flask, jsonify, request, g
from flask_cors import CORS
import atexit
import logging
import os
import time
import traceback
from .config import Config
from .discord import DiscordNotifier
from .repository import PostRepository
from .storage import PostStore, DirectoryPostStore
from .utility import MultiLineFormatter, GunicornWorkerFilter, LOG_FORMAT, LOG_DATE_FORMAT
from .version import __version__

logger = logging.getLogger("archive")

def configure_logging(debug: bool = False) -> logging.Logger:
    """Attach the multi-line formatter and worker filter to the archive loggers."""
    level = logging.DEBUG if debug else logging.INFO
    logger.setLevel(level)
    logger.propagate = False  # Prevent duplicate lines through the root logger

    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(MultiLineFormatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
        handler.addFilter(GunicornWorkerFilter())
        logger.addHandler(handler)
    return logger

def create_app(config=Config, store: PostStore | None = None, notifier: DiscordNotifier | None = None) -> Flask:
    """Build the archive application.

    `store` and `notifier` may be injected (the tests use an in-memory store);
    otherwise they are built from `config`.
    """
    debug = bool(config.DEBUG)
    configure_logging(debug or bool(getattr(config, "DEBUG_LOGGING", False)))

    public_dir = os.path.abspath(config.PUBLIC_DIR)
    app = Flask(__name__, static_folder=public_dir, static_url_path="")
    app.debug = debug

    if store is None:
        store = DirectoryPostStore(config.POSTS_DIR, config.POSTS_EXTENSION)
    store.ensure()

    if notifier is None:
        notifier = DiscordNotifier(config.DISCORD_WEBHOOK_URL or "", enabled=config.is_discord_enabled())
        atexit.register(notifier.shutdown)

    app.extensions["archive.repository"] = PostRepository(store)
    app.extensions["archive.discord"] = notifier

    CORS(app, resources={
        r"/*": {
            "origins": config.CORS_ORIGINS
        }
    })

    @app.before_request
    def start_timer():
        g.request_start_time = time.time()

    @app.after_request
    def log_request(response):
        """Log the request and response details."""
        query_string = f"?{request.query_string.decode()}" if request.query_string else ""
        started = g.get("request_start_time", time.time())
        logging.getLogger('archive.request').info(
            '%s %s%s %s %s %s "%s"',
            request.method,
            request.path,
            query_string,
            response.status_code,
            request.headers.get('X-Forwarded-For', request.remote_addr),
            f"{(time.time() - started):.2f}s",
            request.headers.get('User-Agent', 'Unknown')
        )
        return response

    @app.errorhandler(404)
    def handle_not_found(error):
        logger.warning(f"404 error: {request.path} not found")
        return jsonify({"error": "Endpoint not found"}), 404

    @app.errorhandler(500)
    def handle_internal_error(error):
        """Log unhandled errors and report them to Discord."""
        original = getattr(error, "original_exception", None) or error
        tb_str = "".join(traceback.format_exception(original))
        logger.error(f"Internal server error: {original}\nTraceback:\n{tb_str}")

        notifier.send_diagnostic(
            level="error",
            service="Flask Application",
            message="Internal server error occurred",
            details={
                "Error": str(original),
                "Endpoint": request.path,
                "Method": request.method
            }
        )

        if app.debug:
            return jsonify({
                "error": "Internal server error",
                "message": str(original),
                "traceback": tb_str,
                "endpoint": request.path,
                "method": request.method
            }), 500
        return jsonify({"error": "Internal server error"}), 500

    from .bp.posts import posts_bp
    from .bp.healthcheck import bp_healthcheck
    from .bp.site import bp_site

    app.register_blueprint(posts_bp, url_prefix='/api')
    app.register_blueprint(bp_healthcheck)
    app.register_blueprint(bp_site)

    logger.info(
        "Archive backend version %s ready\n"
        "* Posts saved to: %s\n"
        "* Public assets: %s\n"
        "* Homepage: /  Archive: /archive.html  Admin panel: /write.html",
        __version__, store.describe(), public_dir
    )
    if not app.debug:
        notifier.send_startup_notification("Archive Backend", __version__)

    return app
