from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.validators import require_json_object
from ..container import Container
from ..core.exceptions import ValidationError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    roster = container.roster_service

    @app.route("/upload-students", methods=["POST"], endpoint="upload_students")
    def upload_students():
        if "file" not in request.files:
            return jsonify({"error": "No file uploaded"}), 400
        try:
            students = roster.import_upload(request.files["file"])
            return jsonify(students)
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except Exception:
            logger.exception("Failed to read uploaded roster")
            return jsonify({"error": "Failed to read uploaded file"}), 500

    @app.route("/save-students", methods=["POST"], endpoint="save_students")
    def save_students():
        try:
            data = require_json_object(request.get_json(silent=True))
            roster.save_students(data.get("userId"), data.get("students"), data.get("startRoll"))
            return jsonify({"message": "Students saved"})
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except Exception:
            logger.exception("Failed to save students")
            return jsonify({"error": "Failed to save students"}), 500

    @app.route("/students/<user_id>", methods=["GET"], endpoint="list_students")
    def list_students(user_id: str):
        try:
            return jsonify([s.to_dict() for s in roster.list_students(user_id)])
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except Exception:
            logger.exception("Failed to list students for %s", user_id)
            return jsonify({"error": "Failed to load students"}), 500
