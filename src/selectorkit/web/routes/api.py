from __future__ import annotations

import logging
from typing import Any

from flask import Blueprint, current_app, jsonify, request

from selectorkit.builder import SelectorBuilder
from selectorkit.errors import SelectorError
from selectorkit.jsonproto import to_json
from selectorkit.selector import Renderable, Selector
from selectorkit.shapes import Rectangle

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


class _BadRequest(Exception):
    pass


@api_bp.after_request
def add_cors_headers(response):
    """Allow cross-origin requests to the API."""
    response.headers["Access-Control-Allow-Origin"] = "*"
    response.headers["Access-Control-Allow-Headers"] = "Content-Type"
    response.headers["Access-Control-Allow-Methods"] = "POST, OPTIONS"
    return response


@api_bp.errorhandler(SelectorError)
@api_bp.errorhandler(_BadRequest)
def bad_request(exc: Exception):
    logger.info("Rejected selector request: %s", exc)
    return jsonify({"error": str(exc)}), 400


def _builder() -> SelectorBuilder:
    return current_app.extensions["selector_builder"]


def _selector_from(node: Any) -> Selector:
    if not isinstance(node, dict) or not isinstance(node.get("parts"), list):
        raise _BadRequest("parts required")
    pairs = []
    for part in node["parts"]:
        if not isinstance(part, (list, tuple)) or len(part) != 2:
            raise _BadRequest("each part must be a [kind, value] pair")
        if not all(isinstance(item, str) for item in part):
            raise _BadRequest("part kind and value must be strings")
        pairs.append((part[0], part[1]))
    return _builder().build(pairs)


def _renderable_from(node: Any) -> Renderable:
    if isinstance(node, dict) and "combinator" in node:
        if "left" not in node or "right" not in node:
            raise _BadRequest("left, combinator and right required")
        if not isinstance(node["combinator"], str):
            raise _BadRequest("combinator must be a string")
        return _builder().combine(
            _renderable_from(node["left"]),
            node["combinator"],
            _renderable_from(node["right"]),
        )
    return _selector_from(node)


@api_bp.route("/selectors", methods=["POST"])
def create_selector():
    """Build one compound selector from a list of parts."""
    selector = _selector_from(request.get_json(silent=True))
    return jsonify({
        "selector": selector.render(),
        "parts": [[kind.label, value] for kind, value in selector.parts()],
    })


@api_bp.route("/combine", methods=["POST"])
def combine_selectors():
    """Render a tree of selectors joined by combinators."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or "combinator" not in data:
        raise _BadRequest("left, combinator and right required")
    return jsonify({"selector": _renderable_from(data).render()})


@api_bp.route("/rectangles", methods=["POST"])
def create_rectangle():
    """Return a rectangle's JSON form and its area."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or "width" not in data or "height" not in data:
        raise _BadRequest("width and height required")
    width, height = data["width"], data["height"]
    if not all(isinstance(v, (int, float)) and not isinstance(v, bool) for v in (width, height)):
        raise _BadRequest("width and height must be numbers")
    rect = Rectangle(width, height)
    indent = current_app.extensions["selectorkit_config"].json_indent
    return jsonify({"json": to_json(rect, indent=indent), "area": rect.area()})
