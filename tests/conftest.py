from pathlib import Path
from typing import Any, Callable, Iterator

import pytest

from geokeys.results.feature_assembler import MatchRecord
from geokeys.utilities.config_manager import ConfigManager


def _sample_record(
    external_id: str = "place.1",
    text: str = "Chamonix,Chamonix-Mont-Blanc",
    center: list[float] | None = None,
    **fields: Any,
) -> MatchRecord:
    """Return a complete match record for use in tests."""
    if center is None:
        center = [6.8694, 45.9237]
    return MatchRecord(center=center, external_id=external_id, text=text, **fields)


@pytest.fixture
def make_record() -> Callable[..., MatchRecord]:
    """Factory for complete match records; override any field by keyword."""
    return _sample_record


@pytest.fixture
def settings_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point the settings manager at a temporary config file."""
    path = tmp_path / "config.json"
    monkeypatch.setenv("GEOKEYS_CONFIG", str(path))
    ConfigManager.reset()
    yield path
    ConfigManager.reset()
