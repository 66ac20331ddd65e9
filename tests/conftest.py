from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path
import sys

import pytest


# Ensure `import geocell` works when pytest chooses an import mode that
# doesn't automatically add the project root to sys.path.
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))


@pytest.fixture()
def configure(monkeypatch: pytest.MonkeyPatch) -> Iterator[Callable[..., None]]:
    """Set GEOCELL_* env vars and drop the cached Settings."""

    from geocell.core.settings import get_settings

    monkeypatch.delenv("GEOCELL_DEFAULT_PRECISION", raising=False)
    monkeypatch.delenv("GEOCELL_LOG_LEVEL", raising=False)

    def _configure(**env: str) -> None:
        for key, value in env.items():
            monkeypatch.setenv(f"GEOCELL_{key.upper()}", value)
        get_settings.cache_clear()

    get_settings.cache_clear()
    yield _configure
    get_settings.cache_clear()
