"""
Configuration management: models, loading, and validation.

Handles:
- CatalogConfig: Paths of the document tree and registries
- DiscoveryConfig / ReportConfig: Tunable thresholds
- Environment variable overrides

The loader module performs file I/O; models are pure Pydantic classes.
"""

from infrastructure.config.loader import load_catalog_config
from infrastructure.config.models import CatalogConfig, DiscoveryConfig, ReportConfig

__all__ = [
    # Main config (most commonly used)
    "CatalogConfig",
    "load_catalog_config",
    # Sections
    "DiscoveryConfig",
    "ReportConfig",
]
