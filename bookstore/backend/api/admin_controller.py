from flask import Blueprint, request, jsonify

from backend.factories.service_factory import ServiceFactory

bp = Blueprint("admin_controller", __name__)


@bp.route("/api/admin", methods=["POST"])
def add_admin():
    """
    Register an administrator.

    admin_payload = {
        "name": "Jane",
        "phone": 5551234,
        "email": "jane@example.com",
        "password": "secret"
    }
    """
    payload = request.get_json(silent=True)
    admin = ServiceFactory.create_admin_service().add_admin(payload)
    return jsonify({"message": "Data added successfully", "data": admin.to_json()}), 200
