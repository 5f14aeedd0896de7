from datetime import datetime, timezone

import pytest

from engine.timeutils import add_days, add_months, add_years, years_between


def _utc(*args) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


def test_add_months_rolls_overflowing_days():
    assert add_months(_utc(2026, 1, 31), 1) == _utc(2026, 3, 3)
    assert add_months(_utc(2026, 11, 15), 3) == _utc(2027, 2, 15)
    assert add_months(_utc(2026, 6, 1), 0) == _utc(2026, 6, 1)


def test_add_years_truncates_fraction():
    assert add_years(_utc(2020, 2, 29), 2) == _utc(2022, 3, 1)
    assert add_years(_utc(2021, 1, 1), 1.5) == _utc(2022, 1, 1)
    assert add_years(_utc(2021, 7, 1), 2.99) == _utc(2023, 7, 1)


def test_add_days_and_years_between():
    assert add_days(_utc(2021, 12, 31), 1) == _utc(2022, 1, 1)
    assert years_between(_utc(2021, 1, 1), _utc(2022, 1, 1)) == pytest.approx(1.0)
