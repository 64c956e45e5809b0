"""Value types returned by the codec."""

from __future__ import annotations

from olc_codec.models.code_area import CodeArea

__all__ = [
    "CodeArea",
]
