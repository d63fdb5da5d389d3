from __future__ import annotations

from flask import Flask, jsonify, request

from ..core.enums import EntityKind
from ..core.exceptions import DuplicateRecordError, ValidationError
from ..container import Container
from ..store.kinds import KIND_SPECS
from .codec import RecordDecodeError, encode_list, from_json_dict


def register(app: Flask, container: Container) -> None:
    """JSON CRUD over the five persisted kinds: /api/<kind>[/<id>]."""

    def _entity_kind(kind: str):
        try:
            return EntityKind(kind)
        except ValueError:
            return None

    def _not_found(kind: str):
        return jsonify({"success": False, "message": f"Unknown collection: {kind}"}), 404

    @app.route("/api/<kind>", methods=["GET"], endpoint="api_list_records")
    def list_records(kind: str):
        entity = _entity_kind(kind)
        if entity is None:
            return _not_found(kind)
        records = container.repository_for(entity).list()
        return jsonify(encode_list(records)), 200

    @app.route("/api/<kind>", methods=["POST"], endpoint="api_add_record")
    def add_record(kind: str):
        entity = _entity_kind(kind)
        if entity is None:
            return _not_found(kind)

        data = request.get_json(silent=True)
        try:
            record = from_json_dict(KIND_SPECS[entity].record_type, data)
            records = container.repository_for(entity).add(record)
        except (RecordDecodeError, ValidationError) as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except DuplicateRecordError as e:
            return jsonify({"success": False, "message": str(e)}), 409
        return jsonify(encode_list(records)), 201

    @app.route("/api/<kind>/<item_id>", methods=["PATCH"], endpoint="api_update_record")
    def update_record(kind: str, item_id: str):
        entity = _entity_kind(kind)
        if entity is None:
            return _not_found(kind)

        changes = request.get_json(silent=True)
        if not isinstance(changes, dict):
            return jsonify({"success": False, "message": "Expected a JSON object"}), 400
        try:
            records = container.repository_for(entity).update(item_id, changes)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        return jsonify(encode_list(records)), 200

    @app.route("/api/<kind>/<item_id>", methods=["DELETE"], endpoint="api_delete_record")
    def delete_record(kind: str, item_id: str):
        entity = _entity_kind(kind)
        if entity is None:
            return _not_found(kind)
        records = container.repository_for(entity).delete(item_id)
        return jsonify(encode_list(records)), 200
