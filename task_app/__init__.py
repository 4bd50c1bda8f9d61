"""
Task Service Flask Application Factory.

Provides the ``create_app`` factory function that assembles the task
service. The factory pattern allows multiple application instances, each
with its own configuration and its own task store, to coexist in the
same process -- every test gets a freshly seeded store this way.

The service registers one blueprint:
  * **api_bp** -- the four JSON task endpoints mounted at ``/tasks``.
"""

from __future__ import annotations

import logging

from flask import Flask

from config import get_config

from .store import TaskStore

STORE_EXTENSION = "task_store"

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def create_app(config_name: str | None = None, store: TaskStore | None = None) -> Flask:
    """
    Create and configure the task service application.

    Args:
        config_name: Optional configuration environment name
            (``"development"``, ``"testing"``, ``"production"``). When *None*,
            the value is read from the ``FLASK_ENV`` environment variable,
            defaulting to ``"development"``.
        store: Task store to serve. When *None*, a new store is created,
            holding the demo tasks if ``SEED_TASKS`` is enabled.

    Returns:
        A fully configured Flask application instance ready to serve requests.
    """
    app = Flask(__name__)
    config_class = get_config(config_name)
    app.config.from_object(config_class)

    logger.info("Creating task service app with config: %s", config_class.__name__)

    # Tasks serialise with their fields in declaration order
    app.json.sort_keys = False
    app.json.ensure_ascii = app.config["JSON_ENSURE_ASCII"]

    if store is None:
        store = TaskStore.seeded() if app.config["SEED_TASKS"] else TaskStore()
    app.extensions[STORE_EXTENSION] = store
    logger.info("Task store ready with %d tasks", len(store))

    from .routes.api import api_bp

    app.register_blueprint(api_bp)

    return app
