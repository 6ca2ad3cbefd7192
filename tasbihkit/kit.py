"""
Process-wide default category cache.
"""

from typing import Optional

from prometheus_client import REGISTRY

from shared.config import get_settings
from shared.logging import get_logger
from shared.metrics import MetricsCollector, get_metrics_collector
from .adapters.cdn_client import CdnDatasetClient
from .caching.category_cache import CategoryCache

logger = get_logger("tasbihkit.kit")

_default_kit: Optional[CategoryCache] = None
# Registered once; prometheus rejects duplicate names in a registry.
_default_metrics: Optional[MetricsCollector] = None


def get_tasbih_kit() -> CategoryCache:
    """Get the shared cache, building it from settings on first use."""
    global _default_kit, _default_metrics

    if _default_kit is None:
        settings = get_settings()
        metrics = None
        if settings.enable_metrics:
            if _default_metrics is None:
                _default_metrics = get_metrics_collector(registry=REGISTRY)
            metrics = _default_metrics

        _default_kit = CategoryCache(CdnDatasetClient.from_settings(settings), metrics=metrics)
        logger.info(
            "Created default category cache",
            cdn_base_url=settings.cdn_base_url,
            metrics=metrics is not None,
        )

    return _default_kit


def reset_tasbih_kit() -> None:
    """Forget the shared cache and settings so the next call rebuilds both."""
    global _default_kit
    _default_kit = None
    get_settings.cache_clear()
