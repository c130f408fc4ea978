"""Small object factories."""

from __future__ import annotations

from typing import Any

from selectorkit.models.domain import Rectangle


def rectangle(width: Any, height: Any) -> Rectangle:
    """Return a rectangle exposing ``width``, ``height`` and ``get_area()``.

    Example::

        r = rectangle(10, 20)
        r.width  # 10
        r.get_area()  # 200
    """
    return Rectangle(width=width, height=height)
