"""
TasbihKit: cached access to the category-partitioned Tasbih datasets
published on the jsDelivr CDN.

Structure:
- tasbihkit.caching: CategoryCache, the single-flight dataset cache and its
  query operations.
- tasbihkit.adapters: HTTP client for the CDN.
- tasbihkit.domain: TasbihItem and pure lookup helpers.
- tasbihkit.kit: process-wide default cache.

Cross-cutting config, logging, errors and metrics live in ``shared``.
"""

from shared.errors import (
    FetchFailedError,
    InvalidArgumentError,
    NotFoundError,
    ParseFailedError,
    TasbihKitError,
)
from .adapters import CdnDatasetClient
from .caching import CategoryCache
from .domain import TasbihItem
from .kit import get_tasbih_kit, reset_tasbih_kit

__version__ = "1.0.0"

__all__ = [
    "CategoryCache",
    "CdnDatasetClient",
    "TasbihItem",
    "get_tasbih_kit",
    "reset_tasbih_kit",
    "TasbihKitError",
    "InvalidArgumentError",
    "FetchFailedError",
    "ParseFailedError",
    "NotFoundError",
]
