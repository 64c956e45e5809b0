from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
import sys

import pytest


# Ensure `import olc_codec` works when pytest chooses an import mode that
# doesn't automatically add the project root to sys.path.
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    # Settings are cached per process; isolate tests from each other and
    # from whatever OLC_* variables the developer has exported.
    from olc_codec.core.settings import get_settings

    monkeypatch.delenv("OLC_DEFAULT_CODE_LENGTH", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
