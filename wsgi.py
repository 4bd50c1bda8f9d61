"""WSGI entry point for task service."""

import os

from task_app import create_app

app = create_app(os.getenv("FLASK_ENV", "production"))
