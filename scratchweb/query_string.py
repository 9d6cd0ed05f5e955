"""Parsing of URL query strings."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

Value = Union[str, List[str]]


@dataclass
class QueryString:
    """Query parameters; a key seen more than once maps to a list of values."""

    data: Dict[str, Value] = field(default_factory=dict)

    @classmethod
    def parse(cls, text: str) -> "QueryString":
        """Parse ``a=1&b=2&c&d=`` style text.

        A part without ``=`` gets an empty value; only the first ``=`` splits.
        """
        data: Dict[str, Value] = {}
        for part in text.split("&"):
            key, _, val = part.partition("=")
            existing = data.get(key)
            if existing is None:
                data[key] = val
            elif isinstance(existing, list):
                existing.append(val)
            else:
                data[key] = [existing, val]
        return cls(data)

    def get(self, key: str) -> Optional[Value]:
        """Return the value (or list of values) for ``key``, or None."""
        return self.data.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self.data

    def __len__(self) -> int:
        return len(self.data)