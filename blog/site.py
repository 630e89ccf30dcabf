import os
import logging
from typing import Optional

from flask import Flask
from sqlalchemy.engine import Engine

import database
from blog.routes import PostIdConverter, main_bp
from crud import policy_for
from mapper import MalformedTimestampError

logger = logging.getLogger(__name__)


def create_app(
    engine: Optional[Engine] = None,
    resource_dir: Optional[str] = None,
    storage_errors: Optional[str] = None,
) -> Flask:
    """Build the blog application.

    ``engine`` defaults to the one configured from the environment,
    ``resource_dir`` to ``RESOURCE_DIR`` and ``storage_errors`` to
    ``STORAGE_ERRORS`` (``empty`` or ``raise``).
    """
    app = Flask(__name__, static_folder=None)
    app.config["RESOURCE_DIR"] = os.path.abspath(resource_dir or os.getenv("RESOURCE_DIR", "resource"))
    app.config["STORAGE_ERROR_POLICY"] = policy_for(storage_errors or os.getenv("STORAGE_ERRORS", "empty"))
    app.extensions["blog_engine"] = engine if engine is not None else database.engine

    app.url_map.converters["post_id"] = PostIdConverter
    app.register_blueprint(main_bp)
    app.teardown_appcontext(database.close_connection)

    @app.errorhandler(MalformedTimestampError)
    def malformed_timestamp(exc):
        logger.error("Cannot render post %s: %s", exc.post_id, exc)
        return "Internal Server Error: malformed post timestamp", 500

    return app
