from __future__ import annotations

from enum import Enum
from typing import Union


class Justification(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"

    @classmethod
    def coerce(cls, value: Union["Justification", str]) -> "Justification":
        """Accept an enum member or its string value."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise ValueError(f"Unknown justification: {value!r}") from None


class Size(str, Enum):
    NORMAL = "normal"
    DOUBLE_HEIGHT = "2height"
    DOUBLE_WIDTH = "2width"
    QUAD = "4square"

    @classmethod
    def coerce(cls, value: Union["Size", str]) -> "Size":
        """Accept an enum member or its string value."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise ValueError(f"Unknown text size: {value!r}") from None
