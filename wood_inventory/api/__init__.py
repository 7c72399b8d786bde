from .client import ApiClient, build_client

__all__ = ["ApiClient", "build_client"]
