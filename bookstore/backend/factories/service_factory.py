"""
Service Factory for creating business service instances with proper dependencies.
"""
from flask import current_app

from backend.database.context import DatabaseContext
from backend.modules.admin.models.admin_model import AdminModel
from backend.modules.admin.services.admin_service import AdminService
from backend.modules.catalog.models.book_model import BookModel
from backend.modules.catalog.services.book_catalog_service import BookCatalogService


class ServiceFactory:
    """
    Factory for creating service instances from the clients of the current app.
    Works in both request context (controllers) and application context (CLI commands).
    """

    @staticmethod
    def create_book_catalog_service() -> BookCatalogService:
        clients = DatabaseContext.get_clients()
        return BookCatalogService(
            BookModel(clients.mongo_db),
            clients.cache_store,
            cache_ttl=current_app.config["GENRE_CACHE_TTL"],
        )

    @staticmethod
    def create_admin_service() -> AdminService:
        return AdminService(AdminModel(DatabaseContext.get_mongo_db()))
