"""
TasbihKit caching package.

Holds the category cache: an explicitly owned map from category key to a
pending load or a resolved dataset. Entries live for the process lifetime
unless cleared; there is no expiry.
"""

from .category_cache import CacheEntry, CategoryCache, PendingEntry, ReadyEntry

__all__ = ["CacheEntry", "CategoryCache", "PendingEntry", "ReadyEntry"]
