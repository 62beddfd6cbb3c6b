import sys
from datetime import date

import pytest


class _FixedDate(date):
    @classmethod
    def today(cls):
        return cls(2024, 5, 5)


@pytest.fixture
def fixed_today(monkeypatch):
    """Freeze ``date.today()`` at 2024-05-05 in every loaded app module."""
    for name in ("calendar_logic", "calendar_window", "tray_icon"):
        module = sys.modules.get(name)
        if module is not None:
            monkeypatch.setattr(module, "date", _FixedDate)
    return _FixedDate.today()
