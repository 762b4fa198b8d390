import logging
from typing import Any, Dict

from bson.errors import InvalidDocument
from pydantic import ValidationError
from pymongo.errors import PyMongoError

from shared.modules.admin.models.admin import Admin
from backend.errors import ServerError
from backend.modules.admin.models.admin_model import AdminModel


class AdminService:
    """
    Administrator registration. Records are inserted unconditionally: no
    uniqueness check on email and no password hashing.
    """

    def __init__(self, admin_model: AdminModel, logger=None):
        self.admin_model = admin_model
        self.logger = logger or logging.getLogger(self.__class__.__name__)

    def add_admin(self, payload: Dict[str, Any]) -> Admin:
        # A body that is not a JSON object carries none of the fields
        if not isinstance(payload, dict):
            payload = {}

        try:
            admin = Admin(
                name=payload.get("name"),
                phone=payload.get("phone"),
                email=payload.get("email"),
                password=payload.get("password"),
            )
            return self.admin_model.create(admin)
        except (ValidationError, PyMongoError, InvalidDocument, OverflowError) as e:
            self.logger.exception(f"Admin insert error: {e}")
            raise ServerError("Error occurred while submitting data") from e
