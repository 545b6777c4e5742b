from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.validators import require_json_object
from ..container import Container
from ..core.exceptions import AuthenticationError, ConflictError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    accounts = container.account_service

    @app.route("/register", methods=["POST"], endpoint="register")
    def register_user():
        try:
            data = require_json_object(request.get_json(silent=True))
            user_id = accounts.register(data)
            return jsonify({"id": user_id})
        except (ValidationError, ConflictError) as e:
            return jsonify({"error": str(e)}), 400
        except Exception:
            logger.exception("Failed to register user")
            return jsonify({"error": "Failed to register user"}), 500

    @app.route("/login", methods=["POST"], endpoint="login")
    def login():
        try:
            data = require_json_object(request.get_json(silent=True))
            result = accounts.login(data.get("email", ""), data.get("password", ""))
            return jsonify({"userId": result.user_id, "institutionType": result.institution_type})
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except AuthenticationError as e:
            return jsonify({"error": str(e)}), 401
        except Exception:
            logger.exception("Login failed")
            return jsonify({"error": "Login failed"}), 500

    @app.route("/reset-password", methods=["POST"], endpoint="reset_password")
    def reset_password():
        try:
            data = require_json_object(request.get_json(silent=True))
            accounts.reset_password(data.get("emailOrPhone"), data.get("newPassword"))
            return jsonify({"message": "Password reset successful"})
        except (ValidationError, NotFoundError) as e:
            return jsonify({"error": str(e)}), 400
        except Exception:
            logger.exception("Password reset failed")
            return jsonify({"error": "Password reset failed"}), 500

    @app.route("/profile/<user_id>", methods=["GET"], endpoint="get_profile")
    def get_profile(user_id: str):
        try:
            user = accounts.get_profile(user_id)
            return jsonify(user.to_profile())
        except (ValidationError, NotFoundError):
            return jsonify({"error": "User not found"}), 404
        except Exception:
            logger.exception("Failed to load profile %s", user_id)
            return jsonify({"error": "Failed to load profile"}), 500

    @app.route("/profile/<user_id>", methods=["PUT"], endpoint="update_profile")
    def update_profile(user_id: str):
        try:
            data = require_json_object(request.get_json(silent=True))
            accounts.update_profile(user_id, data)
            return jsonify({"message": "Profile updated"})
        except (ValidationError, NotFoundError) as e:
            return jsonify({"error": str(e)}), 400
        except Exception:
            logger.exception("Failed to update profile %s", user_id)
            return jsonify({"error": "Failed to update profile"}), 500
