"""
In-memory, single-flight cache of Tasbih datasets keyed by category.
"""

import asyncio
import time
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from shared.errors import InvalidArgumentError, NotFoundError, ParseFailedError
from shared.logging import get_logger, set_category_context
from shared.metrics import MetricsCollector
from ..adapters.cdn_client import CdnDatasetClient
from ..domain.lookup import (
    filter_by_ids,
    filter_by_text,
    find_by_id,
    id_set,
    normalize_category,
    normalize_id,
)
from ..domain.models import TasbihItem


Dataset = Tuple[TasbihItem, ...]


@dataclass(frozen=True)
class PendingEntry:
    """A load in flight; every caller for the key awaits the same task."""
    task: "asyncio.Task[Dataset]"


@dataclass(frozen=True)
class ReadyEntry:
    """A resolved dataset."""
    items: Dataset


CacheEntry = Union[PendingEntry, ReadyEntry]


class CategoryCache:
    """Category-keyed dataset cache with request coalescing.

    A category is fetched at most once while a fetch for it is in flight:
    the first caller installs a :class:`PendingEntry` before yielding to the
    event loop and later callers await that same task. Successful loads are
    kept until :meth:`clear_cache`; failed loads are dropped so the next call
    starts over.

    Instances are independent. Use :func:`tasbihkit.kit.get_tasbih_kit` for
    the process-wide default.
    """

    def __init__(
        self,
        client: Optional[CdnDatasetClient] = None,
        *,
        metrics: Optional[MetricsCollector] = None,
    ):
        self.client = client or CdnDatasetClient()
        self.metrics = metrics
        self.logger = get_logger("tasbihkit.category_cache")
        self._entries: Dict[str, CacheEntry] = {}

    async def load_all(self, category: str) -> Dataset:
        """Load the full dataset for ``category``.

        Raises:
            InvalidArgumentError: ``category`` is empty after trimming.
            FetchFailedError: the CDN could not be reached or returned an
                error status.
            ParseFailedError: the body was not a JSON array of items.
        """
        key = normalize_category(category)

        # No await between the lookup and the install below.
        entry = self._entries.get(key)
        if isinstance(entry, ReadyEntry):
            self._record_lookup("hit")
            self.logger.debug("Category cache hit", category=key)
            return entry.items

        if entry is None:
            entry = PendingEntry(asyncio.create_task(self._load(key)))
            self._entries[key] = entry
            self._record_lookup("miss")
            self.logger.debug("Category cache miss", category=key)
        else:
            self._record_lookup("join")
            self.logger.debug("Joining in-flight category load", category=key)

        # Shielded so a cancelled caller does not cancel the shared load.
        return await asyncio.shield(entry.task)

    async def _load(self, key: str) -> Dataset:
        set_category_context(key)
        task = asyncio.current_task()
        url = self.client.dataset_url(key)
        self.logger.info("Fetching category dataset", url=url)

        start = time.perf_counter()
        try:
            items = await self.client.fetch_category(key)
        except BaseException as exc:
            self._discard_pending(key, task)
            outcome = "parse_failed" if isinstance(exc, ParseFailedError) else "fetch_failed"
            self._record_fetch(outcome, time.perf_counter() - start)
            self.logger.warning(
                "Category load failed",
                url=url,
                error_type=type(exc).__name__,
                error=str(exc),
            )
            raise

        current = self._entries.get(key)
        if current is None or self._owned_by(current, task):
            self._entries[key] = ReadyEntry(items)
        else:
            self.logger.debug("Discarding superseded category load", url=url)

        self._record_fetch("success", time.perf_counter() - start)
        self.logger.info("Category dataset cached", items=len(items))
        return items

    def _discard_pending(self, key: str, task: Optional["asyncio.Task[Dataset]"]) -> None:
        current = self._entries.get(key)
        if current is not None and self._owned_by(current, task):
            del self._entries[key]
            self._update_size_gauge()

    @staticmethod
    def _owned_by(entry: CacheEntry, task: Optional["asyncio.Task[Dataset]"]) -> bool:
        return isinstance(entry, PendingEntry) and entry.task is task

    async def search_by_id(self, category: str, item_id: Any) -> TasbihItem:
        """Return the item with ``item_id`` in ``category``.

        Raises:
            InvalidArgumentError: ``item_id`` is missing or blank.
            NotFoundError: no item has that id.
        """
        if item_id is None or not normalize_id(item_id):
            raise InvalidArgumentError("Tasbih ID is required.", details={"category": category})

        items = await self.load_all(category)
        wanted = normalize_id(item_id)

        item = find_by_id(items, wanted)
        if item is None:
            raise NotFoundError(normalize_category(category), wanted)
        return item

    async def search_by_ids(self, category: str, ids: Optional[Iterable[Any]]) -> List[TasbihItem]:
        """Return items whose id is in ``ids``, in dataset order.

        An empty or missing ``ids`` returns ``[]`` without loading anything.
        """
        wanted = id_set(ids or ())
        if not wanted:
            return []

        items = await self.load_all(category)
        return filter_by_ids(items, wanted)

    async def search_by_label(self, category: str, keyword: Optional[str]) -> List[TasbihItem]:
        """Case-insensitive substring search on ``label``."""
        if not keyword:
            return []

        items = await self.load_all(category)
        return filter_by_text(items, "label", str(keyword))

    async def search_by_translation(self, category: str, translation: Optional[str]) -> List[TasbihItem]:
        """Case-insensitive substring search on ``translation``."""
        if not translation:
            return []

        items = await self.load_all(category)
        return filter_by_text(items, "translation", str(translation))

    def clear_cache(self) -> None:
        """Drop every entry.

        In-flight loads are not cancelled. One that finishes afterwards
        stores its result only if the key is still empty.
        """
        dropped = len(self._entries)
        self._entries.clear()
        self._update_size_gauge()
        self.logger.info("Category cache cleared", entries=dropped)

    async def preload(self, categories: Iterable[str], concurrency: int = 5) -> Dict[str, Any]:
        """Warm several categories concurrently.

        Failures are collected into the summary rather than raised.
        """
        planned = list(categories)
        semaphore = asyncio.Semaphore(max(1, concurrency))

        async def _warm(category: str) -> Dataset:
            async with semaphore:
                return await self.load_all(category)

        results = await asyncio.gather(*(_warm(c) for c in planned), return_exceptions=True)

        summary: Dict[str, Any] = {"planned": len(planned), "loaded": [], "errors": {}}
        for category, outcome in zip(planned, results):
            if isinstance(outcome, BaseException):
                summary["errors"][str(category)] = str(outcome)
                continue
            summary["loaded"].append(normalize_category(category))

        self.logger.info(
            "Category preload completed",
            planned=summary["planned"],
            loaded=len(summary["loaded"]),
            errors=len(summary["errors"]),
        )
        return summary

    def cached_categories(self) -> List[str]:
        """Keys whose dataset is fully loaded."""
        return sorted(key for key, entry in self._entries.items() if isinstance(entry, ReadyEntry))

    def is_cached(self, category: str) -> bool:
        return isinstance(self._entries.get(normalize_category(category)), ReadyEntry)

    def _record_lookup(self, result: str) -> None:
        if self.metrics:
            self.metrics.increment_counter("cache_lookups_total", result=result)

    def _record_fetch(self, outcome: str, duration: float) -> None:
        if not self.metrics:
            return
        self.metrics.increment_counter("fetches_total", outcome=outcome)
        self.metrics.observe_histogram("fetch_duration_seconds", duration)
        self._update_size_gauge()

    def _update_size_gauge(self) -> None:
        if self.metrics:
            self.metrics.set_gauge("cached_categories", len(self.cached_categories()))
