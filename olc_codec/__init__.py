"""Open Location Code (Plus Code) encoding, decoding, shortening and recovery.

>>> from olc_codec import encode, decode
>>> encode(47.365590, 8.524997)
'8FVC9G8F+6X'
>>> decode('8FVC9G8F+6X').code_length
10
"""

from __future__ import annotations

from olc_codec.core.constants import CODE_PRECISION_EXTRA, CODE_PRECISION_NORMAL
from olc_codec.core.errors import CodecError, InvalidArgumentError, InvalidCodeError
from olc_codec.core.settings import Settings, get_settings
from olc_codec.models.code_area import CodeArea
from olc_codec.services.decoder import decode
from olc_codec.services.encoder import encode
from olc_codec.services.recoverer import recover_nearest
from olc_codec.services.shortener import shorten
from olc_codec.services.validator import is_full, is_short, is_valid

__all__ = [
    "CODE_PRECISION_EXTRA",
    "CODE_PRECISION_NORMAL",
    "CodeArea",
    "CodecError",
    "InvalidArgumentError",
    "InvalidCodeError",
    "Settings",
    "decode",
    "encode",
    "get_settings",
    "is_full",
    "is_short",
    "is_valid",
    "recover_nearest",
    "shorten",
]
