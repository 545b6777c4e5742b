from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.validators import require_json_object
from ..container import Container
from ..core.exceptions import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    attendance = container.attendance_service

    @app.route("/save-attendance", methods=["POST"], endpoint="save_attendance")
    def save_attendance():
        try:
            data = require_json_object(request.get_json(silent=True))
            attendance.save_attendance(data.get("date"), data.get("userId"), data.get("attendance"))
            return jsonify({"message": "Attendance saved"})
        except (ValidationError, NotFoundError) as e:
            return jsonify({"error": str(e)}), 400
        except Exception:
            logger.exception("Error saving attendance")
            return jsonify({"error": "Failed to save attendance record"}), 500

    @app.route("/attendance/<user_id>", methods=["GET"], endpoint="list_attendance")
    def list_attendance(user_id: str):
        try:
            rows = attendance.list_attendance(user_id, date=request.args.get("date"))
            return jsonify([r.to_dict() for r in rows])
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except Exception:
            logger.exception("Failed to list attendance for %s", user_id)
            return jsonify({"error": "Failed to load attendance"}), 500
