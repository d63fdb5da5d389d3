from __future__ import annotations

from flask import Flask, Response, jsonify, request

from ..container import Container


def register(app: Flask, container: Container) -> None:
    data_management = container.data_management

    @app.route("/api/data/export", methods=["GET"], endpoint="api_export_data")
    def export_data():
        return Response(
            container.store.export_all(),
            mimetype="application/json",
            headers={"Content-Disposition": f"attachment; filename={data_management.backup_filename()}"},
        )

    @app.route("/api/data/import", methods=["POST"], endpoint="api_import_data")
    def import_data():
        upload = request.files.get("file")
        if upload is not None:
            snapshot = upload.read().decode("utf-8", errors="replace")
        else:
            snapshot = request.get_data(as_text=True)

        if not container.store.import_all(snapshot):
            return jsonify({"success": False, "message": "Import failed: invalid or incomplete snapshot"}), 400
        return jsonify({"success": True, "message": "Data imported"}), 200

    @app.route("/api/data/clear", methods=["POST"], endpoint="api_clear_data")
    def clear_data():
        data_management.clear_all()
        return jsonify({"success": True, "message": "All collections cleared"}), 200

    @app.route("/api/data/info", methods=["GET"], endpoint="api_storage_info")
    def storage_info():
        return jsonify([info.as_dict() for info in data_management.storage_info()]), 200
