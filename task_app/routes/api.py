"""
REST API endpoints for Task management.

Successful responses carry JSON; every failure is reported as a
plain-text body holding the error message.

Endpoints:
    GET    /tasks         - All tasks, as an object keyed by task id
    POST   /tasks         - Create a task from a JSON body
    GET    /tasks/<id>    - Get a single task by ID
    DELETE /tasks/<id>    - Delete a task
"""

import logging
from typing import Any

from flask import Blueprint, Response, current_app, jsonify, request
from werkzeug.exceptions import ClientDisconnected

from .. import STORE_EXTENSION
from ..errors import BodyReadError, SerializationError, TaskServiceError
from ..models import Task
from ..store import TaskStore

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


# -----------------------------------------------------------------------------
# Helper Functions
# -----------------------------------------------------------------------------

def get_store() -> TaskStore:
    """Return the task store attached to the current application."""
    return current_app.extensions[STORE_EXTENSION]


def json_response(payload: Any, error_status: int) -> Response:
    """
    Serialize a payload into a JSON response.

    Args:
        payload: JSON-compatible value to send.
        error_status: Status reported if the payload cannot be encoded.

    Raises:
        SerializationError: If encoding fails.
    """
    try:
        return jsonify(payload)
    except (TypeError, ValueError) as exc:
        raise SerializationError(str(exc), status_code=error_status) from exc


# -----------------------------------------------------------------------------
# API Endpoints
# -----------------------------------------------------------------------------

@api_bp.route("/tasks", methods=["GET"])
def list_tasks() -> tuple[Response, int]:
    """
    List every stored task.

    Returns:
        JSON object mapping each task id to its task, with 200 status code.
    """
    logger.info("GET /tasks - Listing all tasks")

    tasks = get_store().get_all()
    logger.info(f"Found {len(tasks)} tasks")

    payload = {task_id: task.to_dict() for task_id, task in tasks.items()}
    return json_response(payload, error_status=500), 200


@api_bp.route("/tasks", methods=["POST"])
def create_task() -> tuple[Response, int]:
    """
    Create a new task.

    Request Body (JSON):
        id: Task identifier, must not be in use
        description: Task description (optional, default: "")
        note: Task note (optional, default: "")
        applications: List of application names (optional, default: [])

    Returns:
        Empty JSON response with 201 status code, or a plain-text error
        and 400 if the body is unreadable, malformed or reuses an id.
    """
    logger.info("POST /tasks - Creating new task")

    try:
        raw = request.get_data(cache=False)
    except (ClientDisconnected, OSError) as exc:
        raise BodyReadError(str(exc)) from exc

    task = Task.from_json(raw)
    get_store().insert(task)

    logger.info(f"Created task with ID: {task.id}")
    return Response(status=201, mimetype="application/json"), 201


@api_bp.route("/tasks/<task_id>", methods=["GET"])
def get_task(task_id: str) -> tuple[Response, int]:
    """
    Get a single task by ID.

    Args:
        task_id: The task identifier, matched as an opaque string.

    Returns:
        JSON response with task data and 200 status code,
        or a plain-text error and 400 if not found.
    """
    logger.info(f"GET /tasks/{task_id} - Fetching task")

    task = get_store().get(task_id)
    return json_response(task.to_dict(), error_status=400), 200


@api_bp.route("/tasks/<task_id>", methods=["DELETE"])
def delete_task(task_id: str) -> tuple[Response, int]:
    """
    Delete a task.

    Args:
        task_id: The task identifier, matched as an opaque string.

    Returns:
        Empty response without a Content-Type and 200 status code,
        or a plain-text error and 400 if not found.
    """
    logger.info(f"DELETE /tasks/{task_id} - Deleting task")

    get_store().delete(task_id)

    response = Response(status=200)
    response.headers.remove("Content-Type")
    return response, 200


# -----------------------------------------------------------------------------
# Error Handlers
# -----------------------------------------------------------------------------

@api_bp.errorhandler(TaskServiceError)
def task_service_error(error: TaskServiceError) -> Response:
    """Report a task service error as a plain-text response."""
    if error.status_code >= 500:
        logger.error(f"{request.method} {request.path} failed: {error.message}")
    else:
        logger.warning(f"{request.method} {request.path} rejected: {error.message}")

    response = Response(f"{error.message}\n", status=error.status_code, mimetype="text/plain")
    response.headers["X-Content-Type-Options"] = "nosniff"
    return response
