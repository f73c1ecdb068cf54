from .catalog_search import CatalogSearchUseCase

__all__ = ["CatalogSearchUseCase"]
