"""
Adapters package for TasbihKit.

Contains the HTTP client wrapper for the content-delivery host. The adapter
encapsulates URL shape, transport timeout and the mapping of transport and
decode failures onto shared errors. It never caches.
"""

from .cdn_client import CdnDatasetClient

__all__ = [
    "CdnDatasetClient",
]
