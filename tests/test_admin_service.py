import pytest
from unittest.mock import MagicMock
from bson.errors import InvalidDocument
from pymongo.errors import AutoReconnect

from backend.errors import ServerError
from backend.modules.admin.models.admin_model import AdminModel
from backend.modules.admin.services.admin_service import AdminService


@pytest.fixture
def service(mongo_db):
    return AdminService(AdminModel(mongo_db))


class TestAddAdmin:

    def test_inserts_record(self, service, mongo_db):
        admin = service.add_admin({"name": "Jane", "phone": "5551234", "email": "jane@example.com", "password": "pw"})

        stored = mongo_db["admins"].docs[0]
        assert admin.id == str(stored["_id"])
        assert stored == {"_id": stored["_id"], "name": "Jane", "phone": 5551234,
                          "email": "jane@example.com", "password": "pw"}

    def test_ignores_unknown_fields(self, service, mongo_db):
        service.add_admin({"name": "Jane", "role": "owner"})

        assert "role" not in mongo_db["admins"].docs[0]

    def test_empty_payload_still_inserts(self, service, mongo_db):
        service.add_admin({})

        assert len(mongo_db["admins"].docs) == 1

    def test_invalid_phone_is_server_error(self, service, mongo_db):
        with pytest.raises(ServerError) as exc_info:
            service.add_admin({"phone": "n/a"})

        assert exc_info.value.message == "Error occurred while submitting data"
        assert mongo_db["admins"].docs == []

    def test_store_failure_is_server_error(self):
        admin_model = MagicMock()
        admin_model.create.side_effect = AutoReconnect("lost")

        with pytest.raises(ServerError):
            AdminService(admin_model).add_admin({"name": "Jane"})

    @pytest.mark.parametrize("payload", [[1, 2], "jane", None])
    def test_non_object_payload_inserts_empty_record(self, service, mongo_db, payload):
        admin = service.add_admin(payload)

        assert admin.id is not None
        assert mongo_db["admins"].docs[0] == {"_id": mongo_db["admins"].docs[0]["_id"]}

    @pytest.mark.parametrize("error", [OverflowError("MongoDB can only handle up to 8-byte ints"),
                                       InvalidDocument("cannot encode object")])
    def test_encoding_failure_is_server_error(self, error):
        admin_model = MagicMock()
        admin_model.create.side_effect = error

        with pytest.raises(ServerError) as exc_info:
            AdminService(admin_model).add_admin({"phone": 10 ** 20})

        assert exc_info.value.message == "Error occurred while submitting data"
