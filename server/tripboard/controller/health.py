"""Health check controller."""

from flask import Blueprint, jsonify
from sqlalchemy import text

from .. import db


def init_app():
    """Initialize health check blueprint."""
    health_api = Blueprint('health', __name__)

    @health_api.route('/health', methods=['GET'])
    def health_check():
        """
        Health check endpoint.
        Returns 200 when the server and database answer, 503 when the database does not.
        """
        try:
            db.session.execute(text("SELECT 1"))
        except Exception as e:
            return jsonify({"status": "degraded", "message": f"Database unavailable: {e}"}), 503
        return jsonify({"status": "ok", "message": "Server is running"}), 200

    return health_api
