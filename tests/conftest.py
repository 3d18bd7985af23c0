from __future__ import annotations

from datetime import datetime

import pytest


@pytest.fixture
def fixed_now() -> datetime:
    # A Monday morning, a few minutes before the 09:00 start.
    return datetime(2026, 2, 2, 8, 55, 30)
