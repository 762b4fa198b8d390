from flask import Blueprint, current_app

bp = Blueprint("health_controller", __name__)


@bp.route("/health", methods=["GET"])
def health():
    return f"✅ Server running on PORT {current_app.config['PORT']}", 200
