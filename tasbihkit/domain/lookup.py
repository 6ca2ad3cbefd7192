"""
Key normalization and in-memory filters over loaded Tasbih datasets.

Nothing in here awaits: the cache relies on these helpers running to
completion between suspension points.
"""

from typing import Any, Iterable, List, Optional, Sequence, Set

from shared.errors import InvalidArgumentError
from .models import TasbihItem


def normalize_category(category: Any) -> str:
    """Trim and lowercase a category name into its cache key."""
    if not isinstance(category, str) or not category.strip():
        raise InvalidArgumentError(
            "Category is required.",
            details={"category": category if isinstance(category, str) else None}
        )
    return category.strip().lower()


def normalize_id(item_id: Any) -> str:
    """Stringify and trim an identifier."""
    return str(item_id).strip()


def id_set(ids: Iterable[Any]) -> Set[str]:
    return {normalize_id(item_id) for item_id in ids}


def find_by_id(items: Sequence[TasbihItem], item_id: str) -> Optional[TasbihItem]:
    """Return the first item whose id matches exactly."""
    for item in items:
        if item.id == item_id:
            return item
    return None


def filter_by_ids(items: Sequence[TasbihItem], ids: Set[str]) -> List[TasbihItem]:
    """Items whose id is in ``ids``, in dataset order."""
    return [item for item in items if item.id in ids]


def filter_by_text(items: Sequence[TasbihItem], field: str, term: str) -> List[TasbihItem]:
    """Case-insensitive substring match on ``field``; items without it never match."""
    needle = term.lower()
    matches = []
    for item in items:
        value = getattr(item, field, None)
        if isinstance(value, str) and needle in value.lower():
            matches.append(item)
    return matches
