"""HTTP bridge that lets the desktop front end call registered handlers.

``GET /api/ipc/<channel>`` invokes the handler registered for ``channel``
on the :class:`RequestRegistry` given to :func:`create_app` and returns its
value as ``{"ok": true, "result": ...}``.
"""

from __future__ import annotations

from flask import Blueprint, Flask, current_app, jsonify

from .errors import NoHandlerError
from .registry import RequestRegistry

bp = Blueprint("ipc", __name__, url_prefix="/api/ipc")


def _registry() -> RequestRegistry:
    return current_app.extensions["appkey.registry"]


@bp.get("")
def list_channels():
    return jsonify({"channels": _registry().channels()})


@bp.route("/<channel>", methods=["GET", "POST"])
def invoke_channel(channel: str):
    try:
        result = _registry().invoke(channel)
    except NoHandlerError:
        return jsonify({"ok": False, "error": "no_handler", "channel": channel}), 404
    resp = jsonify({"ok": True, "result": result})
    resp.headers["Cache-Control"] = "no-store"
    return resp, 200


def create_app(registry: RequestRegistry) -> Flask:
    """Build the Flask application serving ``registry`` over HTTP."""

    app = Flask(__name__)
    app.json.ensure_ascii = False
    app.extensions["appkey.registry"] = registry
    app.register_blueprint(bp)
    return app
