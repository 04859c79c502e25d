"""HTTP routes for measures, products and the combined listing."""

from __future__ import annotations

import json
import re
from dataclasses import is_dataclass
from typing import Any, Callable

from flask import Blueprint, Response, jsonify, request

from .models import Measure, Product
from .repository import NotFoundError

_INT_RE = re.compile(r"[+-]?[0-9]+")


def _atoi(text: str | None) -> int | None:
    """Parse a decimal integer strictly, returning None when it is not one."""
    if text is None or not _INT_RE.fullmatch(text):
        return None
    return int(text)


def _to_json(value: Any) -> Any:
    if is_dataclass(value) and not isinstance(value, type):
        return value.to_dict()
    if isinstance(value, dict):
        return {key: _to_json(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_json(item) for item in value]
    return value


def _error(status: int, message: str) -> tuple[Response, int]:
    return jsonify({"error": message}), status


def _bind(factory: Callable[[Any], Any]) -> Any:
    """Decode the request body as JSON and build a record; raises ValueError."""
    return factory(json.loads(request.get_data() or b""))


def _page(
    invalid_limit: str, invalid_offset: str
) -> tuple[int, int] | tuple[Response, int]:
    limit = _atoi(request.args.get("limit", "10"))
    if limit is None or limit <= 0:
        return _error(400, invalid_limit)
    offset = _atoi(request.args.get("offset", "0"))
    if offset is None or offset < 0:
        return _error(400, invalid_offset)
    return limit, offset


def measures_blueprint(service: Any) -> Blueprint:
    """Routes under /measures backed by a measure service."""
    bp = Blueprint("measures", __name__, url_prefix="/measures")

    @bp.get("")
    def list_measures():
        page = _page("invalid limit value", "invalid offset value")
        if isinstance(page[0], Response):
            return page
        try:
            measures = service.get_all(*page)
        except Exception as exc:
            return _error(500, str(exc))
        return jsonify(_to_json(measures)), 200

    @bp.get("/<id>")
    def get_measure(id: str):
        measure_id = _atoi(id)
        if measure_id is None or measure_id <= 0:
            return _error(400, "invalid measure ID")
        try:
            measure = service.get_by_id(measure_id)
        except Exception:
            return _error(404, "measure not found")
        return jsonify(_to_json(measure)), 200

    @bp.post("")
    def create_measure():
        try:
            measure = _bind(Measure.from_dict)
        except ValueError as exc:
            return _error(400, str(exc))
        if not measure.name:
            return _error(400, "measure name cannot be empty")
        try:
            new_id = service.create(measure)
        except Exception as exc:
            return _error(500, str(exc))
        return jsonify({"id": new_id}), 201

    @bp.put("/<id>")
    def update_measure(id: str):
        measure_id = _atoi(id)
        if measure_id is None:
            return _error(400, "invalid ID format")
        try:
            measure = _bind(Measure.from_dict)
        except ValueError as exc:
            return _error(400, str(exc))
        try:
            updated = service.update(measure_id, measure)
        except Exception as exc:
            message = str(exc)
            return _error(404 if "not found" in message else 500, message)
        return jsonify(_to_json(updated)), 200

    @bp.delete("/<id>")
    def delete_measure(id: str):
        measure_id = _atoi(id)
        if measure_id is None:
            return _error(400, "invalid ID format")
        try:
            service.delete(measure_id)
        except Exception as exc:
            return _error(500, str(exc))
        return "", 204

    return bp


def products_blueprint(service: Any) -> Blueprint:
    """Routes under /products backed by a product service."""
    bp = Blueprint("products", __name__, url_prefix="/products")

    @bp.get("")
    def list_products():
        page = _page("invalid limit parameter", "invalid offset parameter")
        if isinstance(page[0], Response):
            return page
        try:
            products = service.get_all(*page)
        except Exception as exc:
            return _error(500, str(exc))
        return jsonify(_to_json(products)), 200

    @bp.get("/<id>")
    def get_product(id: str):
        product_id = _atoi(id) or 0
        try:
            product = service.get_by_id(product_id)
        except Exception as exc:
            return _error(404, str(exc))
        return jsonify(_to_json(product)), 200

    @bp.post("")
    def create_product():
        try:
            product = _bind(Product.from_dict)
        except ValueError as exc:
            return _error(400, str(exc))
        try:
            new_id = service.create(product)
        except Exception as exc:
            return _error(500, str(exc))
        return jsonify({"id": new_id, "message": "Product created successfully"}), 201

    @bp.put("/<id>")
    def update_product(id: str):
        product_id = _atoi(id)
        if product_id is None:
            return _error(400, "invalid product ID")
        try:
            product = _bind(Product.from_dict)
        except ValueError as exc:
            return _error(400, str(exc))
        try:
            updated = service.update(product_id, product)
        except Exception as exc:
            return _error(404 if isinstance(exc, NotFoundError) else 500, str(exc))
        return jsonify(_to_json(updated)), 200

    @bp.delete("/<id>")
    def delete_product(id: str):
        product_id = _atoi(id)
        if product_id is None:
            return _error(400, "invalid product ID")
        try:
            service.delete(product_id)
        except Exception as exc:
            return _error(404 if isinstance(exc, NotFoundError) else 500, str(exc))
        return "", 204

    return bp


def universal_blueprint(service: Any) -> Blueprint:
    """The /api/entities listing backed by a universal service."""
    bp = Blueprint("entities", __name__, url_prefix="/api")

    @bp.get("/entities")
    def list_entities():
        entity_type = request.args.get("type", "")
        limit = _atoi(request.args.get("limit", "10")) or 0
        offset = _atoi(request.args.get("offset", "0")) or 0
        try:
            result = service.get_all_entities(entity_type, limit, offset)
        except Exception as exc:
            return _error(500, str(exc))
        return jsonify(_to_json(result)), 200

    return bp