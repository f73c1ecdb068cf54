from .httpx_transport import HttpxCatalogTransport

__all__ = ["HttpxCatalogTransport"]
