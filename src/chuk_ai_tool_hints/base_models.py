# chuk_ai_tool_hints/base_models.py
"""Base model for stats objects that hosts read like plain dicts."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class DictCompatModel(BaseModel):
    """Stats model that also answers ``obj["key"]`` and ``obj.get("key")``.

    Host code that renders stats (status bars, debug panels) usually works
    with dicts, so the stats returned by the trackers support both forms.
    """

    def __getitem__(self, key: str) -> Any:
        if key not in type(self).model_fields:
            raise KeyError(key)
        return getattr(self, key)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key in type(self).model_fields

    def get(self, key: str, default: Any = None) -> Any:
        if key in self:
            return getattr(self, key)
        return default

    def __eq__(self, other: object) -> bool:
        if isinstance(other, dict):
            return self.model_dump() == other
        return super().__eq__(other)
