from __future__ import annotations

import dataclasses
from typing import Any


@dataclasses.dataclass(slots=True, eq=False)
class CodecError(ValueError):
    """Codec failure carrying a machine-readable code for callers to map."""

    code: str
    message: str
    details: Any | None = None

    def __str__(self) -> str:
        return self.message


class InvalidArgumentError(CodecError):
    """A length or coordinate that cannot be encoded."""

    def __init__(self, message: str, details: Any | None = None) -> None:
        CodecError.__init__(self, "INVALID_ARGUMENT", message, details)


class InvalidCodeError(CodecError):
    """A code string that is not acceptable for the requested operation."""

    def __init__(self, message: str, details: Any | None = None) -> None:
        CodecError.__init__(self, "INVALID_CODE", message, details)
