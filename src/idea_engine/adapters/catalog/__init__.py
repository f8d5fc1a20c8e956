"""Video catalog adapters."""

from idea_engine.adapters.catalog.base import CatalogChannel, CatalogProvider, CatalogVideo
from idea_engine.adapters.catalog.stub import StubCatalogProvider
from idea_engine.adapters.catalog.youtube import YouTubeCatalogProvider

__all__ = [
    "CatalogChannel",
    "CatalogProvider",
    "CatalogVideo",
    "StubCatalogProvider",
    "YouTubeCatalogProvider",
]
