from .transport import CatalogTransportPort

__all__ = ["CatalogTransportPort"]
