"""
Shared metrics configuration for TasbihKit.
"""

from prometheus_client import Counter, Histogram, Gauge, CollectorRegistry
from typing import Dict, Any, Optional
import time
import threading
from contextlib import contextmanager


class MetricsCollector:
    """Prometheus metrics for the category cache.

    Metrics are only exported when a ``registry`` is supplied; without one
    they are still recorded on unregistered collectors, so several caches
    can live in the same process without name clashes.
    """

    def __init__(self, namespace: str = "tasbih", registry: Optional[CollectorRegistry] = None):
        self.namespace = namespace
        self.registry = registry
        self._metrics: Dict[str, Any] = {}
        self._lock = threading.Lock()
        self._setup_metrics()

    def _setup_metrics(self):
        """Set up cache and fetch metrics."""
        self._metrics["cache_lookups_total"] = Counter(
            f"{self.namespace}_cache_lookups_total",
            "Category cache lookups by result",
            ["result"],
            registry=self.registry
        )

        self._metrics["fetches_total"] = Counter(
            f"{self.namespace}_fetches_total",
            "Dataset fetches by outcome",
            ["outcome"],
            registry=self.registry
        )

        self._metrics["fetch_duration_seconds"] = Histogram(
            f"{self.namespace}_fetch_duration_seconds",
            "Dataset fetch duration in seconds",
            registry=self.registry
        )

        self._metrics["cached_categories"] = Gauge(
            f"{self.namespace}_cached_categories",
            "Number of categories held in the cache",
            registry=self.registry
        )

    def get_metric(self, name: str):
        """Get a metric by name."""
        return self._metrics.get(name)

    @contextmanager
    def time_operation(self, metric_name: str, **labels):
        """Context manager to time an operation into a histogram."""
        start_time = time.perf_counter()
        try:
            yield
        finally:
            self.observe_histogram(metric_name, time.perf_counter() - start_time, **labels)

    def increment_counter(self, metric_name: str, **labels):
        """Increment a counter metric."""
        metric = self._metrics.get(metric_name)
        if metric is None:
            return
        with self._lock:
            (metric.labels(**labels) if labels else metric).inc()

    def set_gauge(self, metric_name: str, value: float, **labels):
        """Set a gauge metric value."""
        metric = self._metrics.get(metric_name)
        if metric is None:
            return
        with self._lock:
            (metric.labels(**labels) if labels else metric).set(value)

    def observe_histogram(self, metric_name: str, value: float, **labels):
        """Observe a histogram metric."""
        metric = self._metrics.get(metric_name)
        if metric is None:
            return
        with self._lock:
            (metric.labels(**labels) if labels else metric).observe(value)


def get_metrics_collector(namespace: str = "tasbih", registry: Optional[CollectorRegistry] = None) -> MetricsCollector:
    """Get a metrics collector."""
    return MetricsCollector(namespace, registry)
