from typing import Any, Dict

from shared.modules.admin.models.admin import Admin
from backend.models.base_nosql_model import BaseNoSqlModel


class AdminModel(BaseNoSqlModel):
    """
    MongoDB persistence wrapper for Admin objects. Insert only.
    """

    collection_name = "admins"

    @classmethod
    def _from_doc(cls, doc: Dict[str, Any]) -> Admin:
        return Admin(**doc)
