"""
Infrastructure layer: External dependencies and I/O boundaries.

Contains adapters for:
- Configuration loading (YAML, environment)
- Document tree scanning and JSON registries
- Observability (logging)

This is the only layer that performs I/O operations.
"""

# Most commonly used - exposed at top level for convenience
from infrastructure.config import (
    CatalogConfig,
    DiscoveryConfig,
    ReportConfig,
    load_catalog_config,
)

__all__ = [
    "load_catalog_config",
    "CatalogConfig",
    "DiscoveryConfig",
    "ReportConfig",
]
