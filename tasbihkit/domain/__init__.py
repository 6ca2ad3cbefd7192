"""
Domain types and pure helpers for Tasbih datasets.
"""

from .models import TasbihItem
from .lookup import normalize_category, normalize_id

__all__ = ["TasbihItem", "normalize_category", "normalize_id"]
