from school_connect_client.api_service import APIError, APIService
from school_connect_client.token_storage import TokenStorage

__all__ = ["APIError", "APIService", "TokenStorage"]
