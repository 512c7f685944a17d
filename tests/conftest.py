from __future__ import annotations

import pytest


@pytest.fixture
def calls() -> list[str]:
    """Ordered record of side effects observed during a test."""
    return []
