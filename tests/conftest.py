from __future__ import annotations

from pathlib import Path

import pytest

from tests._fixtures.metadata_builder import MetadataBuilder


@pytest.fixture
def metadata(tmp_path: Path) -> MetadataBuilder:
    """Provide a reusable metadata tree rooted at the pytest tmp_path."""
    return MetadataBuilder(tmp_path)
