"""YAML catalogs declaring additional datapoint types."""

from .loader import DEFAULT_CATALOG, CatalogError, CatalogLoader, load_catalog

__all__ = ["CatalogLoader", "CatalogError", "load_catalog", "DEFAULT_CATALOG"]
