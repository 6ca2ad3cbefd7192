"""
Tasbih item data model.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TasbihItem(BaseModel):
    """A single recitation record.

    Records are taken as published: ``id`` is stringified when it is a
    scalar and left unset otherwise, so an item without a usable id simply
    never matches an id lookup. ``label`` and ``translation`` keep whatever
    value the dataset holds; only string values take part in text search.
    Any other keys (``count``, ``reference`` ...) are kept as extra
    attributes and returned untouched by :meth:`to_dict`.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    id: Optional[str] = Field(None, description="Identifier, unique within its category")
    label: Any = Field(None, description="Recitation text in its native form")
    translation: Any = Field(None, description="Translated text")

    @field_validator("id", mode="before")
    @classmethod
    def _stringify_id(cls, value: Any) -> Optional[str]:
        if value is None or isinstance(value, str):
            return value
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        if isinstance(value, (int, float)):
            return str(value)
        # Objects and arrays are not identifiers
        return None

    @property
    def extra(self) -> Dict[str, Any]:
        """Fields beyond id/label/translation."""
        return dict(self.model_extra or {})

    def to_dict(self) -> Dict[str, Any]:
        """Return the item as it appeared in the dataset."""
        data = self.model_dump()
        for name in ("id", "label", "translation"):
            if name not in self.model_fields_set:
                data.pop(name, None)
        return data
